"""Model exports.

Import from here: `from src.login_as_customer.models import Customer, Store`
"""

from src.login_as_customer.models.admin import AdminUser
from src.login_as_customer.models.audit import AuditAction, AuditLog
from src.login_as_customer.models.customer import Customer
from src.login_as_customer.models.login_as_customer import (
    AuthenticationData,
    LoggedAsCustomerState,
)
from src.login_as_customer.models.store import Store

__all__ = [
    # Enums
    "AuditAction",
    # Models
    "AdminUser",
    "AuditLog",
    "AuthenticationData",
    "Customer",
    "LoggedAsCustomerState",
    "Store",
]
