"""Delete-or-deactivate rule for master data.

An entity referenced by at least one order keeps its row (orders point at it
with ``PROTECT``) and is deactivated instead.  Unreferenced entities are
removed physically.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any
from uuid import UUID

import structlog
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IMasterDataRepository

logger = structlog.get_logger(__name__)


class DeletionOutcome(StrEnum):
    DELETED = "deleted"
    DEACTIVATED = "deactivated"


class DeletionResultDTO(BaseModel):
    """What happened to an entity the caller asked to delete."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    outcome: DeletionOutcome


def delete_or_deactivate(
    entity: Any, repository: IMasterDataRepository
) -> DeletionResultDTO:
    """Deactivate *entity* if an order references it, delete it otherwise."""
    label = type(entity).__name__.lower()
    entity_id = entity.pk
    if repository.is_referenced(entity):
        entity.deactivate()
        logger.info(f"{label}.deactivated", entity_id=str(entity_id))
        return DeletionResultDTO(id=entity_id, outcome=DeletionOutcome.DEACTIVATED)

    repository.delete(entity)
    logger.info(f"{label}.deleted", entity_id=str(entity_id))
    return DeletionResultDTO(id=entity_id, outcome=DeletionOutcome.DELETED)
