"""Issuance of one-time login-as-customer secrets."""

from datetime import timedelta

from src.login_as_customer.core.config import Settings
from src.login_as_customer.core.logging import get_logger
from src.login_as_customer.core.security import generate_secret, hash_token
from src.login_as_customer.models import AuthenticationData
from src.login_as_customer.models.base import utc_now
from src.login_as_customer.repositories import AuthenticationDataRepository

logger = get_logger(__name__)


class TokenStore:
    """Persists pending authentication data for a customer/admin pair.

    Does not commit; the caller owns the transaction.
    """

    def __init__(self, auth_data_repo: AuthenticationDataRepository, settings: Settings):
        self.auth_data_repo = auth_data_repo
        self.settings = settings

    async def delete_for_admin(self, admin_id: int) -> int:
        """Drop any pending secret previously issued to this admin."""
        deleted = await self.auth_data_repo.delete_for_admin(admin_id)
        if deleted:
            logger.debug("Superseded pending login secret", admin_id=admin_id, deleted=deleted)
        return deleted

    async def save(self, customer_id: int, admin_id: int) -> str:
        """Create authentication data and return the plaintext secret.

        Only the hash is stored, so the secret cannot be recovered later.
        """
        secret = generate_secret()
        created_at = utc_now()
        self.auth_data_repo.add(
            AuthenticationData(
                customer_id=customer_id,
                admin_id=admin_id,
                secret_hash=hash_token(secret),
                created_at=created_at,
                expires_at=created_at
                + timedelta(
                    seconds=self.settings.login_as_customer_authentication_expiration_seconds
                ),
            )
        )
        return secret
