"""Repository for LoggedAsCustomerState."""

from src.login_as_customer.models import LoggedAsCustomerState
from src.login_as_customer.models.base import utc_now
from src.login_as_customer.repositories.base import BaseRepository


class ImpersonationStateRepository(BaseRepository[LoggedAsCustomerState]):
    """Per-admin record of the customer being impersonated."""

    model = LoggedAsCustomerState

    async def get_for_admin(self, admin_id: int) -> LoggedAsCustomerState | None:
        """Get the state row for an admin (primary key lookup)."""
        return await self.session.get(LoggedAsCustomerState, admin_id)

    async def upsert(self, admin_id: int, customer_id: int) -> LoggedAsCustomerState:
        """Create or overwrite the admin's state row (no flush/commit)."""
        state = await self.get_for_admin(admin_id)
        if state is None:
            state = LoggedAsCustomerState(admin_id=admin_id, customer_id=customer_id)
            self.add(state)
        else:
            state.customer_id = customer_id
            state.updated_at = utc_now()
        return state
