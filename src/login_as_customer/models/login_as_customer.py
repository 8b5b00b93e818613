"""Login-as-customer token and per-admin impersonation state."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.login_as_customer.models.base import TZDateTime, utc_now


class AuthenticationData(SQLModel, table=True):
    """Pending one-time secret that lets an admin open a customer session.

    Only the SHA-256 hash of the secret is stored. There is at most one
    pending row per admin; the previous row is deleted before a new one is saved.
    """

    __tablename__ = "login_as_customer"
    __table_args__ = {"schema": "public"}

    id: int | None = Field(default=None, primary_key=True)
    customer_id: int = Field(foreign_key="public.customers.id", index=True)
    admin_id: int = Field(foreign_key="public.admin_users.id", index=True)
    secret_hash: str = Field(max_length=64, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=TZDateTime)
    expires_at: datetime = Field(sa_type=TZDateTime)


class LoggedAsCustomerState(SQLModel, table=True):
    """Customer the admin most recently started impersonating."""

    __tablename__ = "login_as_customer_admin_state"
    __table_args__ = {"schema": "public"}

    admin_id: int = Field(foreign_key="public.admin_users.id", primary_key=True)
    customer_id: int = Field(foreign_key="public.customers.id")
    updated_at: datetime = Field(default_factory=utc_now, sa_type=TZDateTime)
