"""Pydantic schemas for administrator registration and login."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from contact_api.views.common import EmailAddress, SuccessResponse

# Older clients post the secret as "password", newer ones as "secret".
_SECRET_ALIASES = AliasChoices("password", "secret")


class AdminRegisterRequest(BaseModel):
    """Payload accepted by the registration endpoint."""

    name: str = Field(min_length=1)
    email: EmailAddress
    password: str = Field(min_length=6, validation_alias=_SECRET_ALIASES)

    model_config = ConfigDict(extra="forbid")


class AdminLoginRequest(BaseModel):
    """Credentials submitted to authenticate an administrator."""

    email: EmailAddress
    password: str = Field(min_length=1, validation_alias=_SECRET_ALIASES)

    model_config = ConfigDict(extra="forbid")


class AdminPublic(BaseModel):
    """Projection of an admin account that is safe to return to clients."""

    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AdminLoginResponse(SuccessResponse):
    admin: AdminPublic


__all__ = [
    "AdminRegisterRequest",
    "AdminLoginRequest",
    "AdminPublic",
    "AdminLoginResponse",
]
