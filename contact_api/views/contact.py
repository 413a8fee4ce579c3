"""Pydantic schemas for contact-form submissions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from contact_api.views.common import EmailAddress, SuccessResponse


class ContactCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailAddress
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class ContactRead(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = ConfigDict(from_attributes=True)


class ContactListResponse(SuccessResponse):
    contacts: list[ContactRead]


__all__ = ["ContactCreateRequest", "ContactRead", "ContactListResponse"]
