"""Route repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IMasterDataRepository

if TYPE_CHECKING:
    from modules.routes.models import Route


class IRouteRepository(IMasterDataRepository["Route"]):
    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Route]:
        """Retrieve a route by its (upper-cased) code."""
