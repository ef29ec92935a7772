"""Domain error taxonomy shared by every module.

Services raise these; the API layer never builds error payloads by hand;
``modules.core.exception_handler`` renders them.  Each error carries a stable
``code``, the HTTP ``status_code`` the adapter should use, and a ``context``
dict with the values a caller needs to explain the failure (available vs
requested stock, current vs allowed statuses, ...).

``InfrastructureError`` is *not* a ``DomainError``: it signals a
datastore failure, after which the caller decides whether to retry.
"""

from __future__ import annotations

from typing import Any, ClassVar


class DomainError(Exception):
    """Base class for business-rule violations."""

    code: ClassVar[str] = "domain_error"
    status_code: ClassVar[int] = 400

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context

    @property
    def detail(self) -> str:
        return str(self)


class NotFound(DomainError):
    """A referenced entity does not exist.

    Subclasses set ``entity`` so the message and context name the resource.
    """

    code = "not_found"
    status_code = 404
    entity: ClassVar[str] = "entity"

    def __init__(self, identifier: Any) -> None:
        super().__init__(
            f"{self.entity.replace('_', ' ').capitalize()} {identifier} not found.",
            entity=self.entity,
            id=str(identifier),
        )
        self.identifier = identifier


class AlreadyExists(DomainError):
    """A unique attribute is already taken."""

    code = "already_exists"
    status_code = 409


class InactiveReference(DomainError):
    """A referenced entity exists but has been deactivated."""

    code = "inactive_reference"

    def __init__(self, entity: str, identifier: Any) -> None:
        super().__init__(
            f"{entity.replace('_', ' ').capitalize()} {identifier} is inactive.",
            entity=entity,
            id=str(identifier),
        )
        self.entity = entity
        self.identifier = identifier


class DomainValidationError(DomainError):
    """Malformed or missing input detected by a service."""

    code = "invalid"


class InfrastructureError(Exception):
    """The datastore failed while running a unit of work."""

    code = "infrastructure_error"
    status_code = 503
