"""Security utilities.

Re-exports all security-related functions for convenience.
"""

from src.login_as_customer.core.security.crypto import (
    create_access_token,
    decode_token,
    generate_secret,
    hash_token,
)
from src.login_as_customer.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "create_access_token",
    "decode_token",
    "generate_secret",
    "hash_token",
    # Middleware
    "SecurityHeadersMiddleware",
]
