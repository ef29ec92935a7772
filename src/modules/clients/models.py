"""Client model.

Rules implemented here:
- ``email`` is unique and stored trimmed and lower-cased.
- ``phone`` has 8 to 14 digits, optionally prefixed with ``+``.
- An INACTIVE client cannot place orders (enforced by the order engine).
- Clients referenced by orders are set INACTIVE instead of being deleted.
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models

from modules.core.models import BaseModel

PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?[0-9]{8,14}$",
    message="Phone must have 8 to 14 digits, optionally prefixed with '+'.",
)


class ClientStatus(models.TextChoices):
    ACTIVE = "ACTIVE", "Active"
    INACTIVE = "INACTIVE", "Inactive"


class Client(BaseModel):
    """Client placing orders.

    Unlike the other master data, activation is a ``status`` column; the
    ``is_active`` property and ``deactivate()`` keep the common interface.
    """

    name = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    email = models.EmailField(max_length=254, unique=True)
    phone = models.CharField(max_length=20, validators=[PHONE_VALIDATOR])
    address = models.CharField(max_length=255, validators=[MinLengthValidator(5)])
    status = models.CharField(
        max_length=10,
        choices=ClientStatus.choices,
        default=ClientStatus.ACTIVE,
    )

    class Meta:
        db_table = "clients"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="clients_status_idx"),
        ]

    @property
    def is_active(self) -> bool:
        return self.status == ClientStatus.ACTIVE

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self.status = ClientStatus.INACTIVE
        self.save(update_fields=["status"])

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
