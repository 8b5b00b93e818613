"""Login as customer - lets an admin open a storefront session as a customer."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.login_as_customer.core.config import Settings
from src.login_as_customer.core.exceptions import NoSuchEntityError
from src.login_as_customer.core.logging import get_logger
from src.login_as_customer.models import AuditAction
from src.login_as_customer.repositories import CustomerRepository
from src.login_as_customer.schemas.login_as_customer import LoginAsCustomerResponse
from src.login_as_customer.services.admin_session import AdminSession
from src.login_as_customer.services.audit_service import AuditService
from src.login_as_customer.services.eligibility_service import EligibilityService
from src.login_as_customer.services.impersonation_state import ImpersonationStateTracker
from src.login_as_customer.services.store_resolver import StoreResolver
from src.login_as_customer.services.token_store import TokenStore
from src.login_as_customer.services.url_builder import UrlBuilder

logger = get_logger(__name__)

# Storefront action that exchanges the secret for a customer session
LOGIN_PROCEED_ROUTE = "loginascustomer/login/index"

# Largest value an INTEGER primary key column can hold
MAX_ENTITY_ID = 2**31 - 1

CUSTOMER_NOT_FOUND_MESSAGE = "Customer with this ID no longer exists."
STORE_NOT_SELECTED_MESSAGE = "Please select a Store View to login in."
LOGIN_NOT_ALLOWED_MESSAGE = "Login as Customer is not allowed for this customer."


def int_param(params: Mapping[str, Any], name: str) -> int:
    """Read a request parameter as an entity ID.

    Missing, empty or non-numeric values become 0, as do values outside
    1..MAX_ENTITY_ID, which no row can have.
    """
    value = params.get(name)
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            return 0
    return number if 0 < number <= MAX_ENTITY_ID else 0


class LoginAsCustomerService:
    """Validates a login-as-customer request and issues the one-time secret.

    Side effects (superseding the admin's previous secret, saving the new one,
    recording the impersonated customer) share the request's transaction and
    are committed only once the redirect URL has been built.
    """

    def __init__(
        self,
        eligibility_service: EligibilityService,
        customer_repo: CustomerRepository,
        store_resolver: StoreResolver,
        admin_session: AdminSession,
        token_store: TokenStore,
        state_tracker: ImpersonationStateTracker,
        url_builder: UrlBuilder,
        audit_service: AuditService,
        settings: Settings,
        session: AsyncSession,
    ):
        self.eligibility_service = eligibility_service
        self.customer_repo = customer_repo
        self.store_resolver = store_resolver
        self.admin_session = admin_session
        self.token_store = token_store
        self.state_tracker = state_tracker
        self.url_builder = url_builder
        self.audit_service = audit_service
        self.settings = settings
        self.session = session

    async def handle(self, params: Mapping[str, Any]) -> LoginAsCustomerResponse:
        """Run the login-as-customer action for the given request parameters.

        Args:
            params: Request parameters; reads customer_id (falling back to
                    entity_id) and, with manual store choice, store_id.

        Returns:
            LoginAsCustomerResponse with either messages or a redirect URL.

        Raises:
            LocalizedError: If the admin or the store cannot be resolved.
        """
        customer_id = int_param(params, "customer_id")
        if not customer_id:
            customer_id = int_param(params, "entity_id")

        # A zero ID is left to the eligibility check, which fails closed
        eligibility = await self.eligibility_service.check(customer_id)
        if not eligibility.is_enabled:
            messages = eligibility.messages or [LOGIN_NOT_ALLOWED_MESSAGE]
            for message in messages:
                logger.warning(
                    "Login as customer not allowed", customer_id=customer_id, reason=message
                )
            return LoginAsCustomerResponse.failure(*messages)

        try:
            customer = await self.customer_repo.get_required(customer_id)
        except NoSuchEntityError:
            return LoginAsCustomerResponse.failure(CUSTOMER_NOT_FOUND_MESSAGE)

        if self.settings.login_as_customer_store_manual_choice_enabled:
            store_id = int_param(params, "store_id")
            if not store_id:
                return LoginAsCustomerResponse.failure(STORE_NOT_SELECTED_MESSAGE)
        else:
            store_id = customer.store_id

        admin_id = self.admin_session.admin_id

        await self.token_store.delete_for_admin(admin_id)
        secret = await self.token_store.save(customer_id, admin_id)
        await self.state_tracker.set_customer_id(customer_id)

        redirect_url = await self._get_login_proceed_redirect_url(secret, store_id)
        await self.session.commit()

        logger.info(
            "Login as customer started",
            admin_id=admin_id,
            customer_id=customer_id,
            store_id=store_id,
        )
        await self.audit_service.log_action(
            AuditAction.LOGIN_AS_CUSTOMER_INITIATED,
            admin_id=admin_id,
            customer_id=customer_id,
            store_id=store_id,
        )
        return LoginAsCustomerResponse.success(redirect_url)

    async def _get_login_proceed_redirect_url(self, secret: str, store_id: int) -> str:
        store = await self.store_resolver.get_store(store_id)
        return self.url_builder.get_url(
            store, LOGIN_PROCEED_ROUTE, {"secret": secret, "_nosid": True}
        )
