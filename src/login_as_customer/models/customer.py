"""Customer model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.login_as_customer.models.base import TZDateTime, utc_now


class Customer(SQLModel, table=True):
    """Storefront customer account.

    ``assistance_allowed`` records whether the customer opted into remote
    shopping assistance, which gates impersonation by admins.
    """

    __tablename__ = "customers"
    __table_args__ = {"schema": "public"}

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, index=True)
    firstname: str = Field(max_length=255)
    lastname: str = Field(max_length=255)
    store_id: int = Field(foreign_key="public.stores.id", index=True)
    assistance_allowed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TZDateTime)
