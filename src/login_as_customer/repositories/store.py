"""Repository for Store entity."""

from src.login_as_customer.models import Store
from src.login_as_customer.repositories.base import BaseRepository


class StoreRepository(BaseRepository[Store]):
    """Repository for store views."""

    model = Store
