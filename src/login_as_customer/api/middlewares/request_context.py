"""Request context middleware - log correlation and audit metadata."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.login_as_customer.core.audit_context import AuditContext, set_audit_context
from src.login_as_customer.core.logging import bind_request_context, clear_request_context


async def request_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id to the log context and capture audit metadata.

    Must run inside CorrelationIdMiddleware so the correlation ID is available.
    """
    request_id = correlation_id.get()
    clear_request_context()
    bind_request_context(request_id)
    set_audit_context(AuditContext.from_request(request, request_id))
    try:
        return await call_next(request)
    finally:
        set_audit_context(None)
        clear_request_context()
