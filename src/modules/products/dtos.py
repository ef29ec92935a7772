"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation (initial stock included).
- ``UpdateProductDTO``: input for partial updates.  ``stock`` and ``code`` are
  not accepted: stock only moves through orders.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``code`` is non-empty; stored trimmed and upper-cased.
    - ``name`` has 3 to 100 characters.
    - ``price`` and ``stock`` are non-negative.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=3, max_length=100)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    description: str = Field(default="", max_length=500)
    stock: int = Field(default=0, ge=0)
    stock_minimum: int = Field(default=5, ge=0)
    category: str = Field(default="", max_length=100)

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.upper()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Only supplied fields are applied (``model_dump(exclude_unset=True)``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=500)
    stock_minimum: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, max_length=100)
    is_active: Optional[bool] = None

    @field_validator(
        "name", "price", "description", "stock_minimum", "category", "is_active"
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field may not be null.")
        return v
