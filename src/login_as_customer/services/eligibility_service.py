"""Eligibility checks for logging in as a customer."""

from src.login_as_customer.core.config import Settings
from src.login_as_customer.repositories import CustomerRepository
from src.login_as_customer.schemas.login_as_customer import EligibilityResult

MODULE_DISABLED_MESSAGE = "Login as Customer is disabled."
ASSISTANCE_NOT_ALLOWED_MESSAGE = (
    'The user has not enabled the "Allow remote shopping assistance" functionality. '
    "Contact the customer to discuss this user configuration."
)


class EligibilityService:
    """Decides whether an admin may currently log in as a given customer.

    Every check runs and all denial reasons are collected, so the admin sees
    the complete list at once.
    """

    def __init__(self, customer_repo: CustomerRepository, settings: Settings):
        self.customer_repo = customer_repo
        self.settings = settings

    async def check(self, customer_id: int) -> EligibilityResult:
        messages: list[str] = []

        if not self.settings.login_as_customer_enabled:
            messages.append(MODULE_DISABLED_MESSAGE)

        if self.settings.login_as_customer_assistance_required and not (
            await self.customer_repo.is_assistance_allowed(customer_id)
        ):
            messages.append(ASSISTANCE_NOT_ALLOWED_MESSAGE)

        return EligibilityResult(is_enabled=not messages, messages=messages)
