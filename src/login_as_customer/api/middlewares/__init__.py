"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.login_as_customer.core.config import Settings
from src.login_as_customer.core.security import SecurityHeadersMiddleware

from .request_context import request_context_middleware

__all__ = [
    "setup_middlewares",
    "request_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    The last middleware added is the outermost one.
    """
    # Request context - needs the correlation ID, so it sits inside it
    @app.middleware("http")
    async def _request_context(request, call_next):  # type: ignore[no-untyped-def]
        return await request_context_middleware(request, call_next)

    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)
