"""Pydantic schemas for app credentials and access token payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shopify_token.schemas.common import BaseSchema


class Credentials(BaseModel):
    """App credentials, fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    shared_secret: str = Field(min_length=1, repr=False)
    redirect_uri: str = Field(min_length=1)


class AssociatedUser(BaseSchema):
    """The staff member an online (per-user) token was issued for."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    email_verified: bool = False
    account_owner: bool = False
    locale: str | None = None
    collaborator: bool = False


class OfflineAccessTokenData(BaseSchema):
    """Shop-level token returned in the default (offline) access mode."""

    access_token: str
    scope: str


class OnlineAccessTokenData(OfflineAccessTokenData):
    """Short-lived token returned when ``grant_options[]=per-user`` was requested."""

    expires_in: int
    associated_user_scope: str
    associated_user: AssociatedUser


AccessTokenData = OfflineAccessTokenData | OnlineAccessTokenData


def parse_access_token_data(payload: dict[str, Any]) -> AccessTokenData:
    """Validate a token exchange payload into the matching schema.

    Raises:
        pydantic.ValidationError: If required fields are missing.
    """
    if "associated_user" in payload:
        return OnlineAccessTokenData.model_validate(payload)
    return OfflineAccessTokenData.model_validate(payload)
