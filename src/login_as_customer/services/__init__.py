from src.login_as_customer.services.admin_session import AdminSession
from src.login_as_customer.services.audit_service import AuditService
from src.login_as_customer.services.eligibility_service import EligibilityService
from src.login_as_customer.services.impersonation_state import ImpersonationStateTracker
from src.login_as_customer.services.login_as_customer_service import LoginAsCustomerService
from src.login_as_customer.services.store_resolver import StoreResolver
from src.login_as_customer.services.token_store import TokenStore
from src.login_as_customer.services.url_builder import UrlBuilder

__all__ = [
    "AdminSession",
    "AuditService",
    "EligibilityService",
    "ImpersonationStateTracker",
    "LoginAsCustomerService",
    "StoreResolver",
    "TokenStore",
    "UrlBuilder",
]
