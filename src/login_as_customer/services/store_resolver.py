"""Store resolution for storefront URL generation."""

from src.login_as_customer.core.exceptions import NoSuchEntityError
from src.login_as_customer.models import Store
from src.login_as_customer.repositories import StoreRepository


class StoreResolver:
    """Maps a store ID to the store view used as URL scope."""

    def __init__(self, store_repo: StoreRepository):
        self.store_repo = store_repo

    async def get_store(self, store_id: int) -> Store:
        """Get an active store view.

        Raises:
            NoSuchEntityError: If the store does not exist or is disabled.
        """
        store = await self.store_repo.get_by_id(store_id)
        if store is None or not store.is_active:
            raise NoSuchEntityError(
                "The store that was requested wasn't found. Verify the store and try again.",
                entity_type="store",
                entity_id=store_id,
            )
        return store
