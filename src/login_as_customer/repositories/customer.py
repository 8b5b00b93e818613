"""Repository for Customer entity."""

from src.login_as_customer.core.exceptions import NoSuchEntityError
from src.login_as_customer.models import Customer
from src.login_as_customer.repositories.base import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Customer lookups used by the login-as-customer flow."""

    model = Customer

    async def get_required(self, customer_id: int) -> Customer:
        """Get a customer or raise NoSuchEntityError."""
        customer = await self.get_by_id(customer_id)
        if customer is None:
            raise NoSuchEntityError(
                f"No such entity with customerId = {customer_id}",
                entity_type="customer",
                entity_id=customer_id,
            )
        return customer

    async def is_assistance_allowed(self, customer_id: int) -> bool:
        """Whether the customer opted into remote shopping assistance.

        Unknown customers are never allowed.
        """
        customer = await self.get_by_id(customer_id)
        return customer is not None and customer.assistance_allowed
