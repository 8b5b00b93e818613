"""Domain exceptions and the handlers that render them with request_id."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.login_as_customer.core.logging import get_logger

logger = get_logger(__name__)


class LocalizedError(Exception):
    """Error carrying a message that is safe to show to the admin."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoSuchEntityError(LocalizedError):
    """A requested entity does not exist."""

    def __init__(self, message: str, entity_type: str | None = None, entity_id: int | None = None):
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(LocalizedError)
    async def localized_exception_handler(request: Request, exc: LocalizedError) -> JSONResponse:
        request_id = correlation_id.get()
        logger.warning(
            "Request aborted",
            error=exc.message,
            error_type=type(exc).__name__,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": exc.message,
                "request_id": request_id,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
