"""Client domain exceptions."""

from modules.core.exceptions import AlreadyExists, NotFound


class ClientNotFound(NotFound):
    entity = "client"


class ClientAlreadyExists(AlreadyExists):
    """Another client is registered with the same e-mail."""
