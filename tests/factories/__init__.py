"""Test factories for generating test data.

    from tests.factories import CustomerFactory, StoreFactory, ...
"""

from tests.factories.base import BaseFactory, next_id, utc_now
from tests.factories.models import AdminUserFactory, CustomerFactory, StoreFactory

__all__ = [
    "AdminUserFactory",
    "BaseFactory",
    "CustomerFactory",
    "StoreFactory",
    "next_id",
    "utc_now",
]
