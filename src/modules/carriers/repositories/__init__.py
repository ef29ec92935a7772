"""Carrier repositories package."""

from modules.carriers.repositories.django_repository import CarrierDjangoRepository
from modules.carriers.repositories.interfaces import ICarrierRepository

__all__ = ["CarrierDjangoRepository", "ICarrierRepository"]
