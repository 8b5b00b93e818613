"""Schemas for the login-as-customer admin action."""

from pydantic import BaseModel, ConfigDict, Field


class EligibilityResult(BaseModel):
    """Outcome of the login-as-customer eligibility checks."""

    is_enabled: bool = Field(description="Whether the admin may log in as the customer")
    messages: list[str] = Field(
        default_factory=list, description="Human-readable reasons when not enabled"
    )


class LoginAsCustomerResponse(BaseModel):
    """Response of the login action.

    Exactly one of ``messages`` (non-empty) or ``redirect_url`` (non-null)
    is set. Serialized with the ``redirectUrl`` key.
    """

    model_config = ConfigDict(populate_by_name=True)

    redirect_url: str | None = Field(
        default=None,
        alias="redirectUrl",
        description="Storefront URL that opens a session as the customer",
    )
    messages: list[str] = Field(
        default_factory=list, description="Reasons the login could not be started"
    )

    @classmethod
    def failure(cls, *messages: str) -> "LoginAsCustomerResponse":
        return cls(messages=list(messages))

    @classmethod
    def success(cls, redirect_url: str) -> "LoginAsCustomerResponse":
        return cls(redirect_url=redirect_url)
