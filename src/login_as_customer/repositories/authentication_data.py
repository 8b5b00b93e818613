"""Repository for AuthenticationData (login-as-customer secrets)."""

from sqlalchemy import delete

from src.login_as_customer.models import AuthenticationData
from src.login_as_customer.repositories.base import BaseRepository


class AuthenticationDataRepository(BaseRepository[AuthenticationData]):
    """Repository for pending login-as-customer secrets."""

    model = AuthenticationData

    async def delete_for_admin(self, admin_id: int) -> int:
        """Delete every pending row owned by an admin.

        Returns the number of rows deleted.
        """
        stmt = delete(AuthenticationData).where(
            AuthenticationData.admin_id == admin_id  # type: ignore[arg-type]
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
