"""Audit log schemas for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    """Login-as-customer audit entry for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    admin_id: int
    customer_id: int
    store_id: int | None
    action: str
    ip_address: str | None
    user_agent: str | None
    request_id: str | None
    created_at: datetime
