"""Tracks which customer the current admin is logging in as."""

from src.login_as_customer.repositories import ImpersonationStateRepository
from src.login_as_customer.services.admin_session import AdminSession


class ImpersonationStateTracker:
    """Records the customer the authenticated admin started impersonating.

    The storefront side reads this to tie its session back to the admin.
    Does not commit; the caller owns the transaction.
    """

    def __init__(self, state_repo: ImpersonationStateRepository, admin_session: AdminSession):
        self.state_repo = state_repo
        self.admin_session = admin_session

    async def set_customer_id(self, customer_id: int) -> None:
        await self.state_repo.upsert(self.admin_session.admin_id, customer_id)

