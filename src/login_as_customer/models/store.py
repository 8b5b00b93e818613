"""Store view model - the scope a storefront session is created in."""

from sqlmodel import Field, SQLModel


class Store(SQLModel, table=True):
    """Store view with the base URL used to build storefront links."""

    __tablename__ = "stores"
    __table_args__ = {"schema": "public"}

    id: int | None = Field(default=None, primary_key=True)
    code: str = Field(max_length=32, unique=True, index=True)
    name: str = Field(max_length=255)
    base_url: str = Field(max_length=255)
    is_active: bool = Field(default=True)
