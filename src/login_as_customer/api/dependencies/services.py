"""Service factory dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.login_as_customer.api.dependencies.auth import AdminSessionDep
from src.login_as_customer.api.dependencies.db import DBSession
from src.login_as_customer.api.dependencies.repositories import (
    AuthenticationDataRepo,
    CustomerRepo,
    ImpersonationStateRepo,
    StoreRepo,
)
from src.login_as_customer.core.config import Settings, get_settings
from src.login_as_customer.core.db import get_engine
from src.login_as_customer.repositories import AuditLogRepository
from src.login_as_customer.services import (
    AuditService,
    EligibilityService,
    ImpersonationStateTracker,
    LoginAsCustomerService,
    StoreResolver,
    TokenStore,
    UrlBuilder,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_eligibility_service(
    customer_repo: CustomerRepo, settings: SettingsDep
) -> EligibilityService:
    """Get login-as-customer eligibility service."""
    return EligibilityService(customer_repo, settings)


def get_store_resolver(store_repo: StoreRepo) -> StoreResolver:
    """Get store resolver."""
    return StoreResolver(store_repo)


def get_url_builder() -> UrlBuilder:
    """Get storefront URL builder."""
    return UrlBuilder()


def get_token_store(auth_data_repo: AuthenticationDataRepo, settings: SettingsDep) -> TokenStore:
    """Get token store."""
    return TokenStore(auth_data_repo, settings)


def get_impersonation_state_tracker(
    state_repo: ImpersonationStateRepo, admin_session: AdminSessionDep
) -> ImpersonationStateTracker:
    """Get impersonation state tracker bound to the current admin."""
    return ImpersonationStateTracker(state_repo, admin_session)


async def get_audit_service() -> AsyncGenerator[AuditService]:
    """Get audit service with its own isolated session.

    Uses a dedicated session that commits independently from business transactions.
    """
    engine = get_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield AuditService(AuditLogRepository(session), session)


EligibilityServiceDep = Annotated[EligibilityService, Depends(get_eligibility_service)]
StoreResolverDep = Annotated[StoreResolver, Depends(get_store_resolver)]
UrlBuilderDep = Annotated[UrlBuilder, Depends(get_url_builder)]
TokenStoreDep = Annotated[TokenStore, Depends(get_token_store)]
ImpersonationStateTrackerDep = Annotated[
    ImpersonationStateTracker, Depends(get_impersonation_state_tracker)
]
AuditServiceDep = Annotated[AuditService, Depends(get_audit_service)]


def get_login_as_customer_service(
    eligibility_service: EligibilityServiceDep,
    customer_repo: CustomerRepo,
    store_resolver: StoreResolverDep,
    admin_session: AdminSessionDep,
    token_store: TokenStoreDep,
    state_tracker: ImpersonationStateTrackerDep,
    url_builder: UrlBuilderDep,
    audit_service: AuditServiceDep,
    settings: SettingsDep,
    session: DBSession,
) -> LoginAsCustomerService:
    """Get login-as-customer service with all collaborators."""
    return LoginAsCustomerService(
        eligibility_service,
        customer_repo,
        store_resolver,
        admin_session,
        token_store,
        state_tracker,
        url_builder,
        audit_service,
        settings,
        session,
    )


LoginAsCustomerServiceDep = Annotated[
    LoginAsCustomerService, Depends(get_login_as_customer_service)
]
