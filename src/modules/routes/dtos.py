"""Route DTOs (Pydantic v2, immutable).

- ``CreateRouteDTO`` / ``UpdateRouteDTO``: input.  The operating window must
  satisfy ``0 <= start_hour < end_hour <= 23``.
- ``RouteAvailabilityDTO``: output of the availability check.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CreateRouteDTO(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(min_length=1, max_length=30)
    origin: str = Field(min_length=1, max_length=255)
    destination: str = Field(min_length=1, max_length=255)
    carrier_id: UUID
    distance_km: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    start_hour: int = Field(default=8, ge=0, le=23)
    end_hour: int = Field(default=18, ge=0, le=23)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def window_is_ordered(self) -> CreateRouteDTO:
        if self.start_hour >= self.end_hour:
            raise ValueError("start_hour must be earlier than end_hour.")
        return self


class UpdateRouteDTO(BaseModel):
    """Partial update.  The merged window is re-checked by the service."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    origin: Optional[str] = Field(default=None, min_length=1, max_length=255)
    destination: Optional[str] = Field(default=None, min_length=1, max_length=255)
    carrier_id: Optional[UUID] = None
    distance_km: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    start_hour: Optional[int] = Field(default=None, ge=0, le=23)
    end_hour: Optional[int] = Field(default=None, ge=0, le=23)
    is_active: Optional[bool] = None

    @field_validator(
        "origin", "destination", "carrier_id", "start_hour", "end_hour", "is_active"
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v


class RouteAvailabilityDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    route_id: UUID
    is_active: bool
    within_operating_hours: bool
    available: bool
    start_hour: int
    end_hour: int
    checked_at: datetime
