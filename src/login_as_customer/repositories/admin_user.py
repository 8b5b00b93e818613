"""Repository for AdminUser entity."""

from src.login_as_customer.models import AdminUser
from src.login_as_customer.repositories.base import BaseRepository


class AdminUserRepository(BaseRepository[AdminUser]):
    """Repository for back-office users."""

    model = AdminUser
