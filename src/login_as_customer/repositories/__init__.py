"""Repository layer - data access abstraction."""

from src.login_as_customer.repositories.admin_user import AdminUserRepository
from src.login_as_customer.repositories.audit import AuditLogRepository
from src.login_as_customer.repositories.authentication_data import AuthenticationDataRepository
from src.login_as_customer.repositories.base import BaseRepository
from src.login_as_customer.repositories.customer import CustomerRepository
from src.login_as_customer.repositories.impersonation_state import ImpersonationStateRepository
from src.login_as_customer.repositories.store import StoreRepository

__all__ = [
    "AdminUserRepository",
    "AuditLogRepository",
    "AuthenticationDataRepository",
    "BaseRepository",
    "CustomerRepository",
    "ImpersonationStateRepository",
    "StoreRepository",
]
