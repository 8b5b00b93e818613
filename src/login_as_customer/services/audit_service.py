"""Audit logging service - records login-as-customer activity."""

import contextlib

from sqlalchemy.ext.asyncio import AsyncSession

from src.login_as_customer.core.audit_context import get_audit_context
from src.login_as_customer.core.logging import get_logger
from src.login_as_customer.models import AuditAction, AuditLog
from src.login_as_customer.repositories import AuditLogRepository

logger = get_logger(__name__)


class AuditService:
    """Service for recording audit logs.

    Fire-and-forget design: logging failures should not block business operations.
    """

    def __init__(self, audit_repo: AuditLogRepository, session: AsyncSession):
        self.audit_repo = audit_repo
        self.session = session

    async def log_action(
        self,
        action: AuditAction | str,
        admin_id: int,
        customer_id: int,
        store_id: int | None = None,
    ) -> AuditLog | None:
        """Record an audit log entry.

        Request metadata (IP, user agent, request_id) comes from the audit context.
        Failures are logged but do not raise exceptions.

        Returns:
            The created AuditLog, or None if logging failed
        """
        action_value = action.value if isinstance(action, AuditAction) else action
        try:
            ctx = get_audit_context()
            audit_log = AuditLog(
                admin_id=admin_id,
                customer_id=customer_id,
                store_id=store_id,
                action=action_value,
                ip_address=ctx.ip_address if ctx else None,
                user_agent=ctx.user_agent if ctx else None,
                request_id=ctx.request_id if ctx else None,
            )

            self.audit_repo.add(audit_log)
            await self.session.commit()

            logger.debug(
                "Audit log recorded",
                action=action_value,
                admin_id=admin_id,
                customer_id=customer_id,
            )
            return audit_log

        except Exception as e:
            logger.warning(
                "Failed to record audit log",
                action=action_value,
                admin_id=admin_id,
                customer_id=customer_id,
                error=str(e),
            )
            with contextlib.suppress(Exception):
                await self.session.rollback()
            return None

    async def list_for_customer(self, customer_id: int, limit: int = 50) -> list[AuditLog]:
        """List recent login-as-customer entries for a customer."""
        return await self.audit_repo.list_for_customer(customer_id, limit)
