"""Event bus contracts.

Modules publish through ``IEventBus`` and subscribe ``IEventHandler``
implementations in their ``AppConfig.ready``; nothing outside
``shared.infrastructure`` knows which bus is wired in.
"""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Reacts to one event type."""

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    """Dispatches committed domain events to their handlers."""

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...
