"""Carrier DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from modules.carriers.models import VehicleType

PHONE_PATTERN = r"^\+?[0-9]{8,14}$"


class CreateCarrierDTO(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=2, max_length=100)
    document: str = Field(min_length=1, max_length=30)
    phone: str = Field(pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None
    vehicle_type: VehicleType = VehicleType.CAR
    max_concurrent_orders: int = Field(default=10, ge=1)

    @field_validator("document")
    @classmethod
    def normalize_document(cls, v: str) -> str:
        return v.upper()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class UpdateCarrierDTO(BaseModel):
    """Partial update; only supplied fields are applied."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    document: Optional[str] = Field(default=None, min_length=1, max_length=30)
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    email: Optional[EmailStr] = None
    vehicle_type: Optional[VehicleType] = None
    max_concurrent_orders: Optional[int] = Field(default=None, ge=1)
    is_active: Optional[bool] = None

    @field_validator("document")
    @classmethod
    def normalize_document(cls, v: Optional[str]) -> Optional[str]:
        return v.upper() if v else v

    @field_validator(
        "name", "document", "phone", "vehicle_type", "max_concurrent_orders", "is_active"
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v
