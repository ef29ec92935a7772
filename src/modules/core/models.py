"""Base abstract models shared by every entity of the logistics domain.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``ActivatableModel``: Extends BaseModel with an ``is_active`` flag.

Entities referenced by orders are never removed physically; services
deactivate them instead (see ``modules.core.deletion``).  The flag is the
single source of truth for "can this entity take part in a new order".
"""

from __future__ import annotations

import uuid6
from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Activation flag
# ---------------------------------------------------------------------------


class ActivatableModel(BaseModel):
    """Abstract model carrying the ``is_active`` flag.

    ``deactivate()`` is how referenced rows are "deleted"; ``activate()``
    reverses it.  Both are no-ops when the flag already has the target value.
    """

    is_active = models.BooleanField(default=True)

    class Meta:
        abstract = True

    def deactivate(self) -> None:
        if not self.is_active:
            return
        self.is_active = False
        self.save(update_fields=["is_active"])

    def activate(self) -> None:
        if self.is_active:
            return
        self.is_active = True
        self.save(update_fields=["is_active"])
