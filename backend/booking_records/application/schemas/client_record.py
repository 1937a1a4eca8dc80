"""Pydantic DTOs (Data Transfer Objects) for the ClientRecord feature."""

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
INVALID_EMAIL_MESSAGE = "Invalid email format"


def validate_email_shape(value: str) -> str:
    """Accept only a basic ``local@domain.tld`` shape."""
    if not EMAIL_PATTERN.match(value):
        raise ValueError(INVALID_EMAIL_MESSAGE)
    return value


class ClientRecordCreate(BaseModel):
    """Schema for creating a new client record."""

    client_id: str = Field(
        ..., alias="clientId", min_length=1, max_length=100, examples=["TB-004"],
    )
    name: str = Field(..., min_length=1, max_length=255, examples=["Emma Brown"])
    email: str = Field(
        ..., min_length=1, max_length=255, examples=["emma.brown@email.com"],
    )
    phone: str | None = Field(None, max_length=50, examples=["+44 7700 111222"])

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return validate_email_shape(value)


class ClientRecordUpdate(BaseModel):
    """Schema for replacing a client record.

    Updates are full replacements: ``phone`` left out is cleared. An omitted
    or blank ``clientId`` keeps the record's current business identifier.
    """

    client_id: str | None = Field(None, alias="clientId", max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(None, max_length=50)

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("client_id")
    @classmethod
    def _blank_client_id_means_unchanged(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return validate_email_shape(value)


class ClientRecordResponse(BaseModel):
    """Schema returned to the client — mirrors the stored row."""

    id: int
    client_id: str = Field(..., alias="clientId")
    name: str
    email: str
    phone: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True, "populate_by_name": True}


class ClientEnvelope(BaseModel):
    client: ClientRecordResponse


class ClientListResponse(BaseModel):
    clients: list[ClientRecordResponse]
    count: int


class ClientMutationResponse(BaseModel):
    success: bool = True
    message: str
    client: ClientRecordResponse


class ClientDeletedResponse(BaseModel):
    success: bool = True
    message: str
    deleted_client: ClientRecordResponse = Field(..., alias="deletedClient")

    model_config = {"populate_by_name": True}
