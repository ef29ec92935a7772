"""Shipment status DTOs (Pydantic v2, immutable).

- ``CreateShipmentStatusDTO``: name must belong to the fixed vocabulary.
- ``UpdateShipmentStatusDTO``: presentation fields only; ``name`` is immutable.
- ``CheckTransitionDTO`` / ``TransitionCheckDTO``: transition probe in and out.
"""

from __future__ import annotations

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.shipments.constants import ShipmentStatusName

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def normalize_status_name(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Status name must not be empty.")
    return value.strip().upper()


def _validate_color(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError("Color must be a hex value such as #FFA500.")
    return value.upper()


class CreateShipmentStatusDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = Field(default="", max_length=255)
    color: str = "#000000"
    display_order: int = Field(default=0, ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def name_in_vocabulary(cls, v: str) -> str:
        name = normalize_status_name(v)
        if name not in ShipmentStatusName.values:
            raise ValueError(
                f"Unknown status '{name}'. Expected one of: "
                f"{', '.join(ShipmentStatusName.values)}."
            )
        return name

    @field_validator("color")
    @classmethod
    def color_is_hex(cls, v: str) -> str:
        return _validate_color(v)


class UpdateShipmentStatusDTO(BaseModel):
    """All fields optional; unknown fields (including ``name``) are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: Optional[str] = Field(default=None, max_length=255)
    color: Optional[str] = None
    display_order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("description", "color", "display_order", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v

    @field_validator("color")
    @classmethod
    def color_is_hex(cls, v: Optional[str]) -> Optional[str]:
        return _validate_color(v) if v is not None else v


class CheckTransitionDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: str
    requested: str

    @field_validator("current", "requested", mode="before")
    @classmethod
    def normalize(cls, v: str) -> str:
        return normalize_status_name(v)


class TransitionCheckDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_allowed: bool
    current: str
    requested: str
    allowed: List[str]
