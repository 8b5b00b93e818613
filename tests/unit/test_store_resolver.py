"""Unit tests for StoreResolver."""

import pytest

from src.login_as_customer.core.exceptions import NoSuchEntityError
from src.login_as_customer.services import StoreResolver
from tests.factories import StoreFactory

pytestmark = pytest.mark.unit


async def test_returns_active_store(store_repo, store):
    assert await StoreResolver(store_repo).get_store(store.id) is store


async def test_unknown_store_raises(store_repo):
    with pytest.raises(NoSuchEntityError) as exc_info:
        await StoreResolver(store_repo).get_store(404)

    assert exc_info.value.entity_type == "store"
    assert exc_info.value.entity_id == 404


async def test_inactive_store_raises(store_repo):
    store_repo.rows[3] = StoreFactory.build(id=3, is_active=False)

    with pytest.raises(NoSuchEntityError):
        await StoreResolver(store_repo).get_store(3)
