"""Carrier model.

A carrier delivers orders and owns routes.  ``max_concurrent_orders`` caps
how many orders in PENDING, PREPARATION or IN_TRANSIT it may hold at once;
the order engine enforces the cap under a row lock on the carrier.
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models

from modules.core.models import ActivatableModel

PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?[0-9]{8,14}$",
    message="Phone must have 8 to 14 digits, optionally prefixed with '+'.",
)


class VehicleType(models.TextChoices):
    CAR = "CAR", "Car"
    MOTORCYCLE = "MOTORCYCLE", "Motorcycle"
    VAN = "VAN", "Van"
    TRUCK = "TRUCK", "Truck"


class Carrier(ActivatableModel):
    """Carrier aggregate.

    ``document`` identifies the carrier (vehicle plate or ID document) and is
    stored upper-cased so "abc-123" and "ABC-123" collide.
    """

    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    document = models.CharField(max_length=30, unique=True)
    phone = models.CharField(max_length=20, validators=[PHONE_VALIDATOR])
    email = models.EmailField(max_length=100, blank=True, default="")
    vehicle_type = models.CharField(
        max_length=20, choices=VehicleType.choices, default=VehicleType.CAR
    )
    max_concurrent_orders = models.PositiveIntegerField(
        default=10, validators=[MinValueValidator(1)]
    )

    class Meta:
        db_table = "carriers"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(max_concurrent_orders__gte=1),
                name="carriers_capacity_positive",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        if self.document:
            self.document = self.document.strip().upper()
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.document})"
