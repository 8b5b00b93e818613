"""Authentication and authorization dependencies."""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.login_as_customer.api.dependencies.repositories import AdminUserRepo
from src.login_as_customer.core.logging import bind_admin_context
from src.login_as_customer.core.security import decode_token
from src.login_as_customer.models import AdminUser
from src.login_as_customer.services.admin_session import AdminSession

# ACL resource guarding the login-as-customer action
LOGIN_AS_CUSTOMER_RESOURCE = "login_as_customer.login"


async def get_current_admin(
    admin_repo: AdminUserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> AdminUser:
    """Validate the bearer access token and return the active admin user."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    payload = decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    try:
        admin_id = int(payload.get("sub", ""))
    except (TypeError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin id in token",
        ) from e

    admin = await admin_repo.get_by_id(admin_id)
    if admin is None or not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin user not found or inactive",
        )

    bind_admin_context(admin_id, admin.email)
    return admin


CurrentAdmin = Annotated[AdminUser, Depends(get_current_admin)]


def require_resource(resource: str) -> Callable[[AdminUser], Awaitable[AdminUser]]:
    """Build a dependency that requires the admin to hold an ACL resource."""

    async def _require_resource(admin: CurrentAdmin) -> AdminUser:
        if not admin.is_allowed(resource):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not allowed to perform this action",
            )
        return admin

    return _require_resource


LoginAsCustomerAdmin = Annotated[AdminUser, Depends(require_resource(LOGIN_AS_CUSTOMER_RESOURCE))]


def get_admin_session(admin: LoginAsCustomerAdmin) -> AdminSession:
    """Admin session for the authorized login-as-customer request."""
    return AdminSession(user=admin)


AdminSessionDep = Annotated[AdminSession, Depends(get_admin_session)]
