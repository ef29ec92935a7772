"""In-memory event bus implementation."""

from __future__ import annotations

from functools import partial
from typing import Dict, Iterable, List, Type

import structlog
from django.db import transaction

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventBus(IEventBus):
    """Simple in-process event bus."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def publish(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(type(event), []):
            handler.handle(event)


# Global bus instance (singleton)

event_bus = InMemoryEventBus()


def publish_on_commit(events: Iterable[DomainEvent]) -> None:
    """Queue *events* for publication once the current transaction commits.

    Handlers therefore never observe a unit of work that was rolled back.
    Outside a transaction Django runs the callbacks immediately.
    """
    for event in events:
        logger.debug("event.queued", event_name=event.event_name)
        transaction.on_commit(partial(event_bus.publish, event))
