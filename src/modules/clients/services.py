"""Client service layer (Use Cases).

Orchestrates business logic for the Client aggregate, delegating
persistence to the injected ``IClientRepository``.

Rules enforced here:
- E-mail must be unique (compared lower-cased).
- Clients referenced by orders are set INACTIVE instead of being deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.clients.exceptions import ClientAlreadyExists, ClientNotFound
from modules.core.deletion import DeletionResultDTO, delete_or_deactivate
from modules.core.transactions import atomic_operation

if TYPE_CHECKING:
    from modules.clients.dtos import CreateClientDTO, UpdateClientDTO
    from modules.clients.models import Client
    from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service for Client use-cases.

    Receives an ``IClientRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IClientRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @atomic_operation
    def create_client(self, dto: CreateClientDTO) -> Client:
        """Register a client.

        Raises:
            ClientAlreadyExists: the e-mail is already registered.
        """
        self._ensure_email_free(dto.email)
        client = self._repo.create(dto.model_dump())
        logger.info("client.created", client_id=str(client.id), email=client.email)
        return client

    @atomic_operation
    def update_client(self, id: str, dto: UpdateClientDTO) -> Client:
        """Apply the supplied fields to an existing client.

        Raises:
            ClientNotFound: the client does not exist.
            ClientAlreadyExists: the new e-mail belongs to another client.
        """
        client = self.get_client(id)
        changes = dto.model_dump(exclude_unset=True)
        if "email" in changes and changes["email"] != client.email:
            self._ensure_email_free(changes["email"])

        for field, value in changes.items():
            setattr(client, field, value)

        client = self._repo.save(client)
        logger.info("client.updated", client_id=str(id), fields=sorted(changes))
        return client

    @atomic_operation
    def delete_client(self, id: str) -> DeletionResultDTO:
        """Delete the client, or set it INACTIVE when orders reference it."""
        return delete_or_deactivate(self.get_client(id), self._repo)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_client(self, id: str) -> Client:
        """Raises ``ClientNotFound`` if the client does not exist."""
        client = self._repo.get_by_id(id)
        if not client:
            raise ClientNotFound(id)
        return client

    def _ensure_email_free(self, email: str) -> None:
        if self._repo.get_by_email(email):
            logger.warning("client.duplicate_email", email=email)
            raise ClientAlreadyExists("Email already registered.", email=email)
