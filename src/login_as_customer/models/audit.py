"""Audit log model for login-as-customer actions."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.login_as_customer.models.base import TZDateTime, utc_now


class AuditAction(str, Enum):
    """Audit action types for type-safe logging."""

    LOGIN_AS_CUSTOMER_INITIATED = "login_as_customer.initiated"


class AuditLog(SQLModel, table=True):
    """Record of an admin starting a session as a customer."""

    __tablename__ = "login_as_customer_audit_log"
    __table_args__ = (
        Index("ix_login_as_customer_audit_admin_created", "admin_id", "created_at"),
        Index("ix_login_as_customer_audit_customer_created", "customer_id", "created_at"),
        {"schema": "public"},
    )

    id: int | None = Field(default=None, primary_key=True)
    admin_id: int
    customer_id: int
    store_id: int | None = Field(default=None)
    action: str = Field(max_length=50)

    # Request metadata
    ip_address: str | None = Field(max_length=45, default=None)  # IPv4/IPv6
    user_agent: str | None = Field(max_length=500, default=None)
    request_id: str | None = Field(max_length=36, default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_type=TZDateTime)
