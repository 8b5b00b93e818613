"""Request metadata captured for audit entries, held in a contextvar."""

from contextvars import ContextVar
from dataclasses import dataclass

from starlette.requests import Request

USER_AGENT_MAX_LENGTH = 500

_audit_context: ContextVar["AuditContext | None"] = ContextVar("audit_context", default=None)


@dataclass(frozen=True)
class AuditContext:
    """Immutable audit metadata for the current request."""

    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None

    @classmethod
    def from_request(cls, request: Request, request_id: str | None = None) -> "AuditContext":
        """Build the context from request headers and the peer address."""
        client_host = request.client.host if request.client else None
        user_agent = request.headers.get("user-agent")
        return cls(
            ip_address=client_ip(request.headers.get("x-forwarded-for"), client_host),
            user_agent=user_agent[:USER_AGENT_MAX_LENGTH] if user_agent else None,
            request_id=request_id,
        )


def client_ip(forwarded_for: str | None, client_host: str | None) -> str | None:
    """Return the originating client IP (first X-Forwarded-For hop, else the peer)."""
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or client_host
    return client_host


def set_audit_context(ctx: AuditContext | None) -> None:
    _audit_context.set(ctx)


def get_audit_context() -> AuditContext | None:
    return _audit_context.get()
