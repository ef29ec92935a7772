"""Django ORM implementation of the Client repository.

Look-ups return ``None`` for missing or malformed identifiers; the Service
Layer decides how to report them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.clients.models import Client
from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientDjangoRepository(IClientRepository):
    """Concrete Client repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Client]:
        try:
            return Client.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(self, email: str) -> Optional[Client]:
        return Client.objects.filter(email=email.strip().lower()).first()

    def create(self, data: Dict[str, Any]) -> Client:
        client = Client.objects.create(**data)
        logger.info("client.saved", client_id=str(client.id))
        return client

    def save(self, entity: Client) -> Client:
        entity.save()
        logger.info("client.saved", client_id=str(entity.id))
        return entity

    def delete(self, entity: Client) -> None:
        entity.delete()

    def is_referenced(self, entity: Client) -> bool:
        return entity.orders.exists()
