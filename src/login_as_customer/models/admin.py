"""Admin user model."""

from datetime import datetime

from sqlalchemy import Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.login_as_customer.models.base import TZDateTime, utc_now


class AdminUser(SQLModel, table=True):
    """Back-office user allowed to act on customer accounts."""

    __tablename__ = "admin_users"
    __table_args__ = {"schema": "public"}

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=40, unique=True, index=True)
    email: str = Field(max_length=255)
    is_active: bool = Field(default=True)
    is_superuser: bool = Field(default=False)
    acl_resources: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSONB, nullable=False, server_default="[]"),
    )
    created_at: datetime = Field(default_factory=utc_now, sa_type=TZDateTime)

    def is_allowed(self, resource: str) -> bool:
        """Whether this admin may access the given ACL resource."""
        return self.is_superuser or resource in self.acl_resources
