from src.login_as_customer.schemas.audit import AuditLogRead
from src.login_as_customer.schemas.login_as_customer import (
    EligibilityResult,
    LoginAsCustomerResponse,
)

__all__ = [
    "AuditLogRead",
    "EligibilityResult",
    "LoginAsCustomerResponse",
]
