"""Order domain exceptions.

Raised by ``OrderService`` when a lifecycle rule is violated.
``modules.core.exception_handler`` renders them; stock and capacity
failures come from ``modules.products`` and ``modules.carriers``.
"""

from __future__ import annotations

from typing import Iterable, Optional

from modules.core.exceptions import DomainError, NotFound


class OrderNotFound(NotFound):
    """The requested order does not exist."""

    entity = "order"


class IllegalTransition(DomainError):
    """The transition table has no edge from the current status to the requested one.

    ``current`` is ``None`` when a new order asks for a non-initial status.
    """

    code = "illegal_transition"

    def __init__(
        self, current: Optional[str], requested: str, allowed: Iterable[str]
    ) -> None:
        allowed = list(allowed)
        super().__init__(
            f"Cannot transition from {current or 'nothing'} to {requested}. "
            f"Allowed: {', '.join(allowed) or 'none'}.",
            current=current,
            requested=requested,
            allowed=allowed,
        )
        self.current = current
        self.requested = requested
        self.allowed = allowed


class OrderNotEditable(DomainError):
    """Orders can only be edited while PENDING or PREPARATION."""

    code = "order_not_editable"

    def __init__(self, current_status: str) -> None:
        super().__init__(
            f"Order in status {current_status} cannot be edited.",
            current_status=current_status,
        )
        self.current_status = current_status


class OrderNotDeletable(DomainError):
    """Orders can only be deleted while PENDING or CANCELLED."""

    code = "order_not_deletable"

    def __init__(self, current_status: str) -> None:
        super().__init__(
            f"Order in status {current_status} cannot be deleted.",
            current_status=current_status,
        )
        self.current_status = current_status
