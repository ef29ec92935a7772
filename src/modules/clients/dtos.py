"""Client DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateClientDTO``: input for client registration.
- ``UpdateClientDTO``: input for partial updates.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.clients.models import ClientStatus

PHONE_PATTERN = r"^\+?[0-9]{8,14}$"


class CreateClientDTO(BaseModel):
    """Immutable DTO for client registration.

    Validates:
    - ``name`` has 2 to 100 characters.
    - ``email`` is a valid address; stored lower-cased.
    - ``phone`` matches ``+?`` followed by 8 to 14 digits.
    - ``address`` has 5 to 255 characters.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(pattern=PHONE_PATTERN)
    address: str = Field(min_length=5, max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UpdateClientDTO(BaseModel):
    """All fields optional; only supplied fields are applied."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    address: Optional[str] = Field(default=None, min_length=5, max_length=255)
    status: Optional[ClientStatus] = None

    @field_validator("name", "email", "phone", "address", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v
