"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.login_as_customer.api.dependencies.auth import (
    LOGIN_AS_CUSTOMER_RESOURCE,
    AdminSessionDep,
    CurrentAdmin,
    LoginAsCustomerAdmin,
    get_admin_session,
    get_current_admin,
    require_resource,
)

# Database
from src.login_as_customer.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.login_as_customer.api.dependencies.repositories import (
    AdminUserRepo,
    AuthenticationDataRepo,
    CustomerRepo,
    ImpersonationStateRepo,
    StoreRepo,
)

# Services
from src.login_as_customer.api.dependencies.services import (
    AuditServiceDep,
    LoginAsCustomerServiceDep,
    SettingsDep,
    get_audit_service,
    get_login_as_customer_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "LOGIN_AS_CUSTOMER_RESOURCE",
    "AdminSessionDep",
    "CurrentAdmin",
    "LoginAsCustomerAdmin",
    "get_admin_session",
    "get_current_admin",
    "require_resource",
    # Repositories
    "AdminUserRepo",
    "AuthenticationDataRepo",
    "CustomerRepo",
    "ImpersonationStateRepo",
    "StoreRepo",
    # Services
    "AuditServiceDep",
    "LoginAsCustomerServiceDep",
    "SettingsDep",
    "get_audit_service",
    "get_login_as_customer_service",
]
