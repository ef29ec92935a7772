"""Product model with code uniqueness and stock control.

Rules implemented here:
- ``code`` is unique and normalised to uppercase on save.
- ``price`` and ``stock`` can never be negative (validators + DB constraints).
- ``stock`` is only mutated through ``ProductDjangoRepository.adjust_stock``.
- ``stock_minimum`` is the low-stock alert threshold.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import ActivatableModel


class Product(ActivatableModel):
    """Product sold through orders.

    ``unique=True`` on ``code`` creates a UNIQUE INDEX; no additional index
    is needed.
    """

    code = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=100, validators=[MinLengthValidator(3)])
    description = models.CharField(max_length=500, blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    stock = models.PositiveIntegerField(default=0)
    stock_minimum = models.PositiveIntegerField(default=5)
    category = models.CharField(max_length=100, blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.stock_minimum

    def save(self, *args, **kwargs) -> None:
        if self.code:
            self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
