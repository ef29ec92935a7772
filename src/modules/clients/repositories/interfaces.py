"""Client repository interface.

Extends ``IMasterDataRepository[Client]`` with the e-mail look-up used to
keep addresses unique.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IMasterDataRepository

if TYPE_CHECKING:
    from modules.clients.models import Client


class IClientRepository(IMasterDataRepository["Client"]):
    """Repository contract for clients."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Client]:
        """Retrieve a client by e-mail (case-insensitive)."""
