"""Route model.

A route links an origin to a destination, is served by one carrier and only
operates inside its daily window ``[start_hour, end_hour)`` (local time).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import ActivatableModel

HOUR_VALIDATORS = [MinValueValidator(0), MaxValueValidator(23)]


class Route(ActivatableModel):
    code = models.CharField(max_length=30, unique=True)
    origin = models.CharField(max_length=255)
    destination = models.CharField(max_length=255)
    distance_km = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    start_hour = models.PositiveSmallIntegerField(default=8, validators=HOUR_VALIDATORS)
    end_hour = models.PositiveSmallIntegerField(default=18, validators=HOUR_VALIDATORS)
    carrier = models.ForeignKey(
        "carriers.Carrier",
        on_delete=models.PROTECT,
        related_name="routes",
    )

    class Meta:
        db_table = "routes"
        ordering = ["code"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(start_hour__lt=models.F("end_hour"))
                & models.Q(end_hour__lte=23),
                name="routes_operating_window_valid",
            ),
        ]

    def is_operating(self, at: Optional[datetime] = None) -> bool:
        """``True`` when ``at`` (default: now) falls inside the operating window."""
        hour = timezone.localtime(at or timezone.now()).hour
        return self.start_hour <= hour < self.end_hour

    def save(self, *args, **kwargs) -> None:
        if self.code:
            self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.code}: {self.origin} -> {self.destination}"
