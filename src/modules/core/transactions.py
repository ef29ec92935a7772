"""Unit-of-work boundary for service commands.

``atomic_operation`` is the only place a service opens a transaction.  The
decorated call runs inside ``transaction.atomic()``: any exception escaping
it rolls back every write performed so far (order rows, stock, history).

Datastore failures (``django.db.DatabaseError`` and subclasses) are
re-raised as ``InfrastructureError`` so callers can tell "the database broke"
apart from "a business rule said no".  Domain errors pass through untouched.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

import structlog
from django.db import DatabaseError, transaction

from modules.core.exceptions import InfrastructureError

logger = structlog.get_logger(__name__)

R = TypeVar("R")


def atomic_operation(func: Callable[..., R]) -> Callable[..., R]:
    """Run *func* as one all-or-nothing unit of work."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> R:
        try:
            with transaction.atomic():
                return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.error(
                "transaction.datastore_failure",
                operation=func.__qualname__,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise InfrastructureError(
                f"Datastore failure during {func.__qualname__}; no changes were committed."
            ) from exc

    return wrapper
