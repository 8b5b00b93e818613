"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.login_as_customer.api.dependencies.db import DBSession
from src.login_as_customer.repositories import (
    AdminUserRepository,
    AuthenticationDataRepository,
    CustomerRepository,
    ImpersonationStateRepository,
    StoreRepository,
)


def get_admin_user_repository(session: DBSession) -> AdminUserRepository:
    """Get admin user repository."""
    return AdminUserRepository(session)


def get_customer_repository(session: DBSession) -> CustomerRepository:
    """Get customer repository."""
    return CustomerRepository(session)


def get_store_repository(session: DBSession) -> StoreRepository:
    """Get store repository."""
    return StoreRepository(session)


def get_authentication_data_repository(session: DBSession) -> AuthenticationDataRepository:
    """Get login-as-customer authentication data repository."""
    return AuthenticationDataRepository(session)


def get_impersonation_state_repository(session: DBSession) -> ImpersonationStateRepository:
    """Get impersonation state repository."""
    return ImpersonationStateRepository(session)


AdminUserRepo = Annotated[AdminUserRepository, Depends(get_admin_user_repository)]
CustomerRepo = Annotated[CustomerRepository, Depends(get_customer_repository)]
StoreRepo = Annotated[StoreRepository, Depends(get_store_repository)]
AuthenticationDataRepo = Annotated[
    AuthenticationDataRepository, Depends(get_authentication_data_repository)
]
ImpersonationStateRepo = Annotated[
    ImpersonationStateRepository, Depends(get_impersonation_state_repository)
]
