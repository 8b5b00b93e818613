"""Authenticated admin for the current request."""

from dataclasses import dataclass

from src.login_as_customer.core.exceptions import LocalizedError
from src.login_as_customer.models import AdminUser


@dataclass(frozen=True)
class AdminSession:
    """Identity of the admin performing the current request."""

    user: AdminUser | None

    def get_user(self) -> AdminUser:
        if self.user is None or self.user.id is None:
            raise LocalizedError("The admin session is not authenticated.")
        return self.user

    @property
    def admin_id(self) -> int:
        return self.get_user().id  # type: ignore[return-value]
