"""Unit tests for LoginAsCustomerService."""

from unittest.mock import AsyncMock

import pytest
from hypothesis import HealthCheck, given, settings as hypothesis_settings
from hypothesis import strategies as st

from src.login_as_customer.core.exceptions import NoSuchEntityError
from src.login_as_customer.core.security import hash_token
from src.login_as_customer.models import AuditAction
from src.login_as_customer.schemas import EligibilityResult
from src.login_as_customer.services import (
    EligibilityService,
    ImpersonationStateTracker,
    LoginAsCustomerService,
    StoreResolver,
    TokenStore,
    UrlBuilder,
)
from src.login_as_customer.services.login_as_customer_service import (
    CUSTOMER_NOT_FOUND_MESSAGE,
    LOGIN_NOT_ALLOWED_MESSAGE,
    STORE_NOT_SELECTED_MESSAGE,
)
from tests.factories import CustomerFactory, StoreFactory

pytestmark = pytest.mark.unit


@pytest.fixture
def build_service(
    settings,
    customer_repo,
    store_repo,
    auth_data_repo,
    state_repo,
    admin_session,
    mock_audit_service,
    mock_session,
):
    """Factory wiring the service with in-memory repositories."""

    def _build(**overrides) -> LoginAsCustomerService:
        deps = {
            "eligibility_service": EligibilityService(customer_repo, settings),
            "customer_repo": customer_repo,
            "store_resolver": StoreResolver(store_repo),
            "admin_session": admin_session,
            "token_store": TokenStore(auth_data_repo, settings),
            "state_tracker": ImpersonationStateTracker(state_repo, admin_session),
            "url_builder": UrlBuilder(),
            "audit_service": mock_audit_service,
            "settings": settings,
            "session": mock_session,
        }
        deps.update(overrides)
        return LoginAsCustomerService(**deps)

    return _build


@pytest.fixture
def fixed_secret(monkeypatch):
    """Make the generated secret deterministic."""
    monkeypatch.setattr(
        "src.login_as_customer.services.token_store.generate_secret", lambda: "abc123"
    )
    return "abc123"


def _assert_exclusive(response) -> None:
    assert bool(response.messages) != bool(response.redirect_url)


class TestSuccessfulLogin:
    async def test_returns_redirect_url_with_secret(self, build_service, fixed_secret):
        response = await build_service().handle({"customer_id": "42"})

        assert response.messages == []
        assert (
            response.redirect_url
            == "https://shop.test/loginascustomer/login/index?secret=abc123&_nosid=1"
        )

    async def test_serializes_with_redirect_url_key(self, build_service, fixed_secret):
        response = await build_service().handle({"customer_id": 42})

        assert response.model_dump(by_alias=True) == {
            "redirectUrl": "https://shop.test/loginascustomer/login/index?secret=abc123&_nosid=1",
            "messages": [],
        }

    async def test_falls_back_to_entity_id(self, build_service, auth_data_repo):
        response = await build_service().handle({"entity_id": "42"})

        assert response.redirect_url is not None
        assert auth_data_repo.rows[0].customer_id == 42

    async def test_zero_customer_id_falls_back_to_entity_id(self, build_service, auth_data_repo):
        response = await build_service().handle({"customer_id": "0", "entity_id": "42"})

        assert response.redirect_url is not None
        assert auth_data_repo.rows[0].customer_id == 42

    async def test_stores_hashed_secret_for_admin(
        self, build_service, auth_data_repo, fixed_secret
    ):
        await build_service().handle({"customer_id": "42"})

        [row] = auth_data_repo.rows
        assert row.admin_id == 7
        assert row.customer_id == 42
        assert row.secret_hash == hash_token("abc123")
        assert row.expires_at > row.created_at

    async def test_records_impersonated_customer(self, build_service, state_repo):
        await build_service().handle({"customer_id": "42"})

        assert state_repo.rows[7].customer_id == 42

    async def test_commits_once(self, build_service, mock_session):
        await build_service().handle({"customer_id": "42"})

        mock_session.commit.assert_awaited_once()

    async def test_writes_audit_entry(self, build_service, mock_audit_service):
        await build_service().handle({"customer_id": "42"})

        mock_audit_service.log_action.assert_awaited_once_with(
            AuditAction.LOGIN_AS_CUSTOMER_INITIATED,
            admin_id=7,
            customer_id=42,
            store_id=1,
        )

    async def test_uses_customer_home_store(
        self, build_service, customer_repo, store_repo, fixed_secret
    ):
        other_store = StoreFactory.build(id=2, base_url="https://fr.shop.test")
        store_repo.rows[2] = other_store
        customer_repo.rows[42].store_id = 2

        response = await build_service().handle({"customer_id": "42", "store_id": "1"})

        assert response.redirect_url == (
            "https://fr.shop.test/loginascustomer/login/index?secret=abc123&_nosid=1"
        )


class TestEligibility:
    async def test_disabled_reasons_become_messages(self, build_service, auth_data_repo):
        eligibility = AsyncMock(spec=EligibilityService)
        eligibility.check.return_value = EligibilityResult(is_enabled=False, messages=["R1", "R2"])

        response = await build_service(eligibility_service=eligibility).handle(
            {"customer_id": "42"}
        )

        assert response.model_dump(by_alias=True) == {"redirectUrl": None, "messages": ["R1", "R2"]}
        assert auth_data_repo.rows == []

    async def test_denial_without_reasons_gets_generic_message(
        self, build_service, auth_data_repo
    ):
        eligibility = AsyncMock(spec=EligibilityService)
        eligibility.check.return_value = EligibilityResult(is_enabled=False)

        response = await build_service(eligibility_service=eligibility).handle(
            {"customer_id": "42"}
        )

        assert response.model_dump(by_alias=True) == {
            "redirectUrl": None,
            "messages": [LOGIN_NOT_ALLOWED_MESSAGE],
        }
        _assert_exclusive(response)
        assert auth_data_repo.rows == []

    @pytest.mark.parametrize(
        "params",
        [
            {"customer_id": "9999999999"},
            {"customer_id": str(10**20)},
            {"customer_id": "-42"},
            {"entity_id": "2147483648"},
        ],
    )
    async def test_out_of_range_customer_id_checks_id_zero(self, build_service, params):
        eligibility = AsyncMock(spec=EligibilityService)
        eligibility.check.return_value = EligibilityResult(is_enabled=False, messages=["R1"])

        response = await build_service(eligibility_service=eligibility).handle(params)

        eligibility.check.assert_awaited_once_with(0)
        assert response.messages == ["R1"]

    @pytest.mark.parametrize("params", [{}, {"customer_id": ""}, {"customer_id": "abc"}])
    async def test_missing_customer_id_checks_id_zero(self, build_service, params):
        eligibility = AsyncMock(spec=EligibilityService)
        eligibility.check.return_value = EligibilityResult(is_enabled=False, messages=["R1"])

        response = await build_service(eligibility_service=eligibility).handle(params)

        eligibility.check.assert_awaited_once_with(0)
        assert response.redirect_url is None

    async def test_missing_customer_id_fails_closed(self, build_service, mock_session):
        response = await build_service().handle({})

        assert response.redirect_url is None
        assert response.messages
        mock_session.commit.assert_not_awaited()

    async def test_customer_without_assistance_is_refused(
        self, build_service, customer_repo, state_repo
    ):
        customer_repo.rows[42].assistance_allowed = False

        response = await build_service().handle({"customer_id": "42"})

        assert response.redirect_url is None
        assert len(response.messages) == 1
        assert state_repo.rows == {}


class TestValidationFailures:
    async def test_unknown_customer(self, build_service, customer_repo, auth_data_repo):
        eligibility = AsyncMock(spec=EligibilityService)
        eligibility.check.return_value = EligibilityResult(is_enabled=True)

        response = await build_service(eligibility_service=eligibility).handle(
            {"customer_id": "999"}
        )

        assert response.model_dump(by_alias=True) == {
            "redirectUrl": None,
            "messages": [CUSTOMER_NOT_FOUND_MESSAGE],
        }
        assert auth_data_repo.rows == []

    @pytest.mark.parametrize(
        "params", [{"customer_id": "42"}, {"customer_id": "42", "store_id": "0"}]
    )
    async def test_manual_store_choice_requires_store(
        self, build_service, settings, auth_data_repo, params
    ):
        settings.login_as_customer_store_manual_choice_enabled = True

        response = await build_service().handle(params)

        assert response.model_dump(by_alias=True) == {
            "redirectUrl": None,
            "messages": [STORE_NOT_SELECTED_MESSAGE],
        }
        assert auth_data_repo.rows == []

    async def test_oversized_store_id_counts_as_not_selected(
        self, build_service, settings, auth_data_repo
    ):
        settings.login_as_customer_store_manual_choice_enabled = True

        response = await build_service().handle({"customer_id": "42", "store_id": "9999999999"})

        assert response.messages == [STORE_NOT_SELECTED_MESSAGE]
        assert auth_data_repo.rows == []

    async def test_manual_store_choice_uses_selected_store(
        self, build_service, settings, store_repo, fixed_secret
    ):
        settings.login_as_customer_store_manual_choice_enabled = True
        store_repo.rows[5] = StoreFactory.build(id=5, base_url="https://de.shop.test/")

        response = await build_service().handle({"customer_id": "42", "store_id": "5"})

        assert response.redirect_url == (
            "https://de.shop.test/loginascustomer/login/index?secret=abc123&_nosid=1"
        )


class TestInfrastructureFailures:
    async def test_unknown_store_propagates_without_commit(
        self, build_service, settings, mock_session, mock_audit_service
    ):
        settings.login_as_customer_store_manual_choice_enabled = True

        with pytest.raises(NoSuchEntityError):
            await build_service().handle({"customer_id": "42", "store_id": "77"})

        mock_session.commit.assert_not_awaited()
        mock_audit_service.log_action.assert_not_awaited()

    async def test_customer_lookup_error_other_than_missing_propagates(
        self, build_service, customer_repo
    ):
        customer_repo.get_required = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(RuntimeError):
            await build_service().handle({"customer_id": "42"})


class TestOneTokenPerAdmin:
    async def test_second_login_supersedes_first(self, build_service, auth_data_repo):
        service = build_service()

        first = await service.handle({"customer_id": "42"})
        second = await service.handle({"customer_id": "42"})

        assert first.redirect_url != second.redirect_url
        assert len(auth_data_repo.for_admin(7)) == 1
        assert auth_data_repo.rows[0].secret_hash == hash_token(_secret_from(second.redirect_url))

    @given(customer_ids=st.lists(st.integers(min_value=1, max_value=5), min_size=1, max_size=8))
    @hypothesis_settings(
        max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture]
    )
    async def test_at_most_one_token_per_admin(
        self, build_service, customer_repo, auth_data_repo, customer_ids
    ):
        for customer_id in range(1, 6):
            customer_repo.rows.setdefault(
                customer_id, CustomerFactory.build(id=customer_id, store_id=1)
            )
        auth_data_repo.rows.clear()
        service = build_service()

        for customer_id in customer_ids:
            response = await service.handle({"customer_id": str(customer_id)})
            _assert_exclusive(response)
            assert len(auth_data_repo.for_admin(7)) == 1

        assert auth_data_repo.for_admin(7)[0].customer_id == customer_ids[-1]


def _secret_from(url: str) -> str:
    return url.split("secret=")[1].split("&")[0]
