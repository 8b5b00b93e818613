"""Repository for AuditLog entity."""

from sqlmodel import select

from src.login_as_customer.models import AuditLog
from src.login_as_customer.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLog]):
    """Repository for login-as-customer audit entries."""

    model = AuditLog

    async def list_for_customer(self, customer_id: int, limit: int = 50) -> list[AuditLog]:
        """Most recent audit entries for a customer, newest first."""
        result = await self.session.execute(
            select(AuditLog)
            .where(AuditLog.customer_id == customer_id)
            .order_by(AuditLog.created_at.desc())  # type: ignore[attr-defined]
            .limit(limit)
        )
        return list(result.scalars().all())
