"""ShipmentStatus model.

One row per name of the fixed vocabulary in ``constants.ShipmentStatusName``.
Orders reference these rows by foreign key; the lifecycle engine compares
``name`` against the transition table.
"""

from __future__ import annotations

from django.core.validators import RegexValidator
from django.db import models

from modules.core.models import ActivatableModel
from modules.shipments.constants import ShipmentStatusName

HEX_COLOR_VALIDATOR = RegexValidator(
    regex=r"^#[0-9A-Fa-f]{6}$",
    message="Color must be a hex value such as #FFA500.",
)


class ShipmentStatus(ActivatableModel):
    name = models.CharField(
        max_length=20, unique=True, choices=ShipmentStatusName.choices
    )
    description = models.CharField(max_length=255, blank=True, default="")
    color = models.CharField(
        max_length=7, default="#000000", validators=[HEX_COLOR_VALIDATOR]
    )
    display_order = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "shipment_statuses"
        ordering = ["display_order", "name"]
        verbose_name_plural = "shipment statuses"

    def save(self, *args, **kwargs) -> None:
        if self.name:
            self.name = self.name.strip().upper()
        if self.color:
            self.color = self.color.upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
