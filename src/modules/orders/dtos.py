"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and ``OrderService``.
DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order creation.
- ``UpdateOrderDTO``: partial edit; only fields present in the payload apply.
- ``ChangeStatusDTO``: input for a status transition.
- ``StatusChangeResultDTO`` / ``DeletedOrderDTO``: command results.
"""

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    ``status_id`` is optional; when given it must name the initial status.
    """

    model_config = ConfigDict(frozen=True)

    client_id: UUID
    product_id: UUID
    carrier_id: UUID
    route_id: UUID
    quantity: int = Field(ge=1)
    status_id: Optional[UUID] = None
    notes: str = ""
    estimated_delivery_date: Optional[date] = None

    @field_validator("notes", mode="before")
    @classmethod
    def notes_default(cls, v: Optional[str]) -> str:
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order edits.

    Status is not editable here (use ``ChangeStatusDTO``); unknown fields,
    ``status`` included, are rejected.  References and quantity may not be
    null; ``estimated_delivery_date`` may be cleared with ``null``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    carrier_id: Optional[UUID] = None
    route_id: Optional[UUID] = None
    quantity: Optional[int] = Field(default=None, ge=1)
    notes: Optional[str] = None
    estimated_delivery_date: Optional[date] = None

    @field_validator("client_id", "product_id", "carrier_id", "route_id", "quantity")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v


class ChangeStatusDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    notes: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("Status must not be empty.")
        return v.strip().upper()

    @field_validator("notes", mode="before")
    @classmethod
    def notes_default(cls, v: Optional[str]) -> str:
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class StatusChangeResultDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: UUID
    previous_status: str
    new_status: str


class DeletedOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
