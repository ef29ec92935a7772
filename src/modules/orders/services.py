"""Order service layer: the order lifecycle engine.

Every public command is one unit of work (``atomic_operation``): any
exception rolls back order rows, stock and history together, and domain
events are only published after commit.

Locks are always taken in the same order to avoid deadlocks::

    order row -> product row(s), ascending id -> carrier row

Rules enforced here:
- New orders start in PENDING; the client and route must be active.
- Stock never goes negative.  Creation reserves ``quantity``; cancellation
  and deletion of a non-cancelled order release it.
- A carrier never holds more active orders (PENDING, PREPARATION,
  IN_TRANSIT) than ``max_concurrent_orders``.
- Status changes follow the transition table in ``modules.shipments``.
- Edits only while PENDING or PREPARATION; deletion only while PENDING or
  CANCELLED.

Callers are authorised before they get here; ``actor`` is only recorded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Type
from uuid import UUID

import structlog
from django.utils import timezone

from modules.carriers.exceptions import CarrierNotFound, CarrierUnavailable
from modules.clients.exceptions import ClientNotFound
from modules.core.exceptions import InactiveReference, NotFound
from modules.core.permissions import SYSTEM_ACTOR, Actor
from modules.core.transactions import atomic_operation
from modules.orders.constants import CREATION_NOTE
from modules.orders.dtos import DeletedOrderDTO, StatusChangeResultDTO
from modules.orders.events import (
    OrderCancelled,
    OrderCreated,
    OrderDeleted,
    OrderStatusChanged,
)
from modules.orders.exceptions import (
    IllegalTransition,
    OrderNotDeletable,
    OrderNotEditable,
    OrderNotFound,
)
from modules.products.exceptions import InsufficientStock, ProductNotFound
from modules.routes.exceptions import RouteNotFound
from modules.shipments.constants import (
    DELETABLE_STATUSES,
    EDITABLE_STATUSES,
    INITIAL_STATUS,
    ShipmentStatusName,
    allowed_transitions,
    is_allowed,
)
from modules.shipments.exceptions import ShipmentStatusNotFound

if TYPE_CHECKING:
    from modules.carriers.models import Carrier
    from modules.carriers.repositories.interfaces import ICarrierRepository
    from modules.clients.repositories.interfaces import IClientRepository
    from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.routes.repositories.interfaces import IRouteRepository
    from modules.shipments.models import ShipmentStatus
    from modules.shipments.repositories.interfaces import IShipmentStatusRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        client_repository: IClientRepository,
        product_repository: IProductRepository,
        carrier_repository: ICarrierRepository,
        route_repository: IRouteRepository,
        status_repository: IShipmentStatusRepository,
    ) -> None:
        self._order_repo = order_repository
        self._client_repo = client_repository
        self._product_repo = product_repository
        self._carrier_repo = carrier_repository
        self._route_repo = route_repository
        self._status_repo = status_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @atomic_operation
    def create_order(self, dto: CreateOrderDTO, actor: Optional[Actor] = None) -> Order:
        """Create a PENDING order and reserve its stock.

        Steps:
        1. Validate client and route (exist, active) and the initial status.
        2. Lock the product row; check it is active and covers ``quantity``.
        3. Lock the carrier row; check it is active and below capacity.
        4. Insert the order, decrement stock, record the creation history.

        Raises:
            ClientNotFound / RouteNotFound / ProductNotFound / CarrierNotFound.
            InactiveReference: a referenced entity is inactive.
            IllegalTransition: ``status_id`` names a status other than PENDING.
            InsufficientStock: stock is below ``quantity``.
            CarrierUnavailable: the carrier is at capacity.
        """
        actor = actor or SYSTEM_ACTOR
        log = logger.bind(
            client_id=str(dto.client_id),
            product_id=str(dto.product_id),
            carrier_id=str(dto.carrier_id),
            quantity=dto.quantity,
            actor=actor.label,
        )
        log.info("order.creation_started")

        client = self._require_active(
            self._client_repo.get_by_id(str(dto.client_id)), ClientNotFound, "client", dto.client_id
        )
        route = self._require_active(
            self._route_repo.get_by_id(str(dto.route_id)), RouteNotFound, "route", dto.route_id
        )
        initial_status = self._initial_status(dto.status_id)

        product = self._require_active(
            self._product_repo.get_for_update(str(dto.product_id)),
            ProductNotFound,
            "product",
            dto.product_id,
        )
        if product.stock < dto.quantity:
            log.warning("order.insufficient_stock", available=product.stock)
            raise InsufficientStock(
                available=product.stock, requested=dto.quantity, product_id=product.id
            )

        carrier = self._lock_available_carrier(dto.carrier_id)

        order = self._order_repo.create(
            {
                "client": client,
                "product": product,
                "carrier": carrier,
                "route": route,
                "shipment_status": initial_status,
                "quantity": dto.quantity,
                "total": product.price * dto.quantity,
                "notes": dto.notes,
                "estimated_delivery_date": dto.estimated_delivery_date,
            }
        )

        product = self._product_repo.adjust_stock(str(product.id), -dto.quantity)
        log.info("order.stock_reserved", remaining=product.stock)

        self._order_repo.add_history(
            order,
            new_status=initial_status.name,
            notes=CREATION_NOTE,
            changed_by=actor.id or "",
        )
        order.add_domain_event(
            OrderCreated(
                aggregate_id=order.id,
                order_number=order.order_number,
                quantity=order.quantity,
            )
        )
        self._order_repo.save(order)

        log.info("order.created", order_id=str(order.id), order_number=order.order_number)
        return self._order_repo.get_by_id(str(order.id)) or order

    @atomic_operation
    def change_status(
        self,
        order_id: Any,
        new_status: str,
        notes: str = "",
        actor: Optional[Actor] = None,
    ) -> StatusChangeResultDTO:
        """Move an order along the transition table.

        CANCELLED restores the reserved stock; DELIVERED stamps
        ``actual_delivery_date``.  ``notes`` are appended, never overwritten.

        Raises:
            OrderNotFound: the order does not exist.
            ShipmentStatusNotFound: ``new_status`` is not a stored status.
            IllegalTransition: the table has no edge current -> new.
        """
        actor = actor or SYSTEM_ACTOR
        order = self._lock_order(order_id)
        current = order.status_name
        requested = (new_status or "").strip().upper()

        log = logger.bind(
            order_id=str(order.id),
            current_status=current,
            new_status=requested,
            actor=actor.label,
        )

        target = self._status_repo.get_by_name(requested) if requested else None
        if target is None:
            raise ShipmentStatusNotFound(requested)

        if not is_allowed(current, target.name):
            log.warning("order.invalid_transition")
            raise IllegalTransition(current, target.name, allowed_transitions(current))

        if target.name == ShipmentStatusName.CANCELLED:
            self._release_stock(order)
            order.add_domain_event(
                OrderCancelled(aggregate_id=order.id, quantity_restored=order.quantity)
            )
            log.info("order.stock_released", quantity=order.quantity)
        elif target.name == ShipmentStatusName.DELIVERED:
            order.actual_delivery_date = timezone.now()
        elif current == ShipmentStatusName.NOT_DELIVERED:
            # Retrying delivery puts the order back into the carrier's active load.
            self._lock_available_carrier(order.carrier_id, exclude_order_id=order.id)

        order.shipment_status = target
        order.append_notes(notes)
        order.add_domain_event(
            OrderStatusChanged(
                aggregate_id=order.id, previous_status=current, new_status=target.name
            )
        )
        self._order_repo.save(order)
        self._order_repo.add_history(
            order,
            new_status=target.name,
            old_status=current,
            notes=notes,
            changed_by=actor.id or "",
        )

        log.info("order.status_updated")
        return StatusChangeResultDTO(
            order_id=order.id, previous_status=current, new_status=target.name
        )

    @atomic_operation
    def update_order(
        self, order_id: Any, dto: UpdateOrderDTO, actor: Optional[Actor] = None
    ) -> Order:
        """Edit a PENDING or PREPARATION order.

        A quantity or product change re-balances stock: available stock is
        ``stock + old quantity`` for the same product, or the new product's
        stock.  It is checked before any write.

        Raises:
            OrderNotFound: the order does not exist.
            OrderNotEditable: the order is past PREPARATION (or cancelled).
            InsufficientStock / CarrierUnavailable / InactiveReference /
            *NotFound: a changed reference is unusable.
        """
        actor = actor or SYSTEM_ACTOR
        order = self._lock_order(order_id)
        current = order.status_name
        log = logger.bind(order_id=str(order.id), current_status=current, actor=actor.label)

        if current not in EDITABLE_STATUSES:
            log.warning("order.not_editable")
            raise OrderNotEditable(current)

        changes = dto.model_dump(exclude_unset=True)

        if "client_id" in changes:
            order.client = self._require_active(
                self._client_repo.get_by_id(str(changes["client_id"])),
                ClientNotFound,
                "client",
                changes["client_id"],
            )
        if "route_id" in changes:
            order.route = self._require_active(
                self._route_repo.get_by_id(str(changes["route_id"])),
                RouteNotFound,
                "route",
                changes["route_id"],
            )

        new_product_id = changes.get("product_id", order.product_id)
        new_quantity = changes.get("quantity", order.quantity)
        if str(new_product_id) != str(order.product_id) or new_quantity != order.quantity:
            self._rebalance_stock(order, new_product_id, new_quantity)
            log.info(
                "order.stock_rebalanced",
                product_id=str(order.product_id),
                quantity=order.quantity,
            )

        if "carrier_id" in changes and str(changes["carrier_id"]) != str(order.carrier_id):
            order.carrier = self._lock_available_carrier(
                changes["carrier_id"], exclude_order_id=order.id
            )

        if "notes" in changes:
            order.notes = changes["notes"] or ""
        if "estimated_delivery_date" in changes:
            order.estimated_delivery_date = changes["estimated_delivery_date"]

        self._order_repo.save(order)
        log.info("order.updated", fields=sorted(changes))
        return self._order_repo.get_by_id(str(order.id)) or order

    @atomic_operation
    def delete_order(self, order_id: Any, actor: Optional[Actor] = None) -> DeletedOrderDTO:
        """Remove a PENDING or CANCELLED order (and its history).

        A PENDING order still holds stock, which is released; a CANCELLED
        order already gave it back.

        Raises:
            OrderNotFound: the order does not exist.
            OrderNotDeletable: the order is in any other status.
        """
        actor = actor or SYSTEM_ACTOR
        order = self._lock_order(order_id)
        current = order.status_name
        log = logger.bind(order_id=str(order.id), current_status=current, actor=actor.label)

        if current not in DELETABLE_STATUSES:
            log.warning("order.not_deletable")
            raise OrderNotDeletable(current)

        restored = 0
        if current != ShipmentStatusName.CANCELLED:
            self._release_stock(order)
            restored = order.quantity
            log.info("order.stock_released", quantity=restored)

        deleted_id = order.id
        order.add_domain_event(
            OrderDeleted(
                aggregate_id=deleted_id,
                order_number=order.order_number,
                quantity_restored=restored,
            )
        )
        self._order_repo.delete(order)

        log.info("order.deleted")
        return DeletedOrderDTO(id=deleted_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: Any) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(str(order_id))
        if not order:
            raise OrderNotFound(order_id)
        return order

    # ------------------------------------------------------------------
    # Helpers (always called inside the unit of work)
    # ------------------------------------------------------------------

    def _lock_order(self, order_id: Any) -> Order:
        order = self._order_repo.get_for_update(str(order_id))
        if not order:
            raise OrderNotFound(order_id)
        return order

    @staticmethod
    def _require_active(
        entity: Any, not_found: Type[NotFound], name: str, identifier: Any
    ) -> Any:
        if entity is None:
            raise not_found(identifier)
        if not entity.is_active:
            raise InactiveReference(name, identifier)
        return entity

    def _initial_status(self, status_id: Optional[UUID]) -> ShipmentStatus:
        if status_id is None:
            initial = self._status_repo.get_by_name(INITIAL_STATUS)
            if initial is None:
                raise ShipmentStatusNotFound(INITIAL_STATUS)
            return initial

        requested = self._require_active(
            self._status_repo.get_by_id(str(status_id)),
            ShipmentStatusNotFound,
            "shipment_status",
            status_id,
        )
        if requested.name != INITIAL_STATUS:
            raise IllegalTransition(None, requested.name, [str(INITIAL_STATUS)])
        return requested

    def _lock_available_carrier(
        self, carrier_id: Any, exclude_order_id: Optional[Any] = None
    ) -> Carrier:
        carrier = self._require_active(
            self._carrier_repo.get_for_update(str(carrier_id)),
            CarrierNotFound,
            "carrier",
            carrier_id,
        )
        active_count = self._order_repo.count_active_for_carrier(
            carrier.id, exclude_order_id=exclude_order_id
        )
        if active_count >= carrier.max_concurrent_orders:
            logger.warning(
                "order.carrier_unavailable",
                carrier_id=str(carrier.id),
                active_count=active_count,
                max_concurrent_orders=carrier.max_concurrent_orders,
            )
            raise CarrierUnavailable(
                active_count, carrier.max_concurrent_orders, carrier_id=carrier.id
            )
        return carrier

    def _release_stock(self, order: Order) -> None:
        self._product_repo.get_for_update(str(order.product_id))
        self._product_repo.adjust_stock(str(order.product_id), order.quantity)

    def _rebalance_stock(self, order: Order, new_product_id: Any, new_quantity: int) -> None:
        locked = {
            str(p.id): p
            for p in self._product_repo.lock_many([order.product_id, new_product_id])
        }
        new_product: Optional[Product] = locked.get(str(new_product_id))
        if new_product is None:
            raise ProductNotFound(new_product_id)

        same_product = str(new_product.id) == str(order.product_id)
        if not same_product and not new_product.is_active:
            raise InactiveReference("product", new_product_id)

        available = new_product.stock + (order.quantity if same_product else 0)
        if available < new_quantity:
            raise InsufficientStock(
                available=available, requested=new_quantity, product_id=new_product.id
            )

        if same_product:
            self._product_repo.adjust_stock(str(new_product.id), order.quantity - new_quantity)
        else:
            self._product_repo.adjust_stock(str(order.product_id), order.quantity)
            self._product_repo.adjust_stock(str(new_product.id), -new_quantity)
            order.product = new_product

        order.quantity = new_quantity
        order.total = new_product.price * new_quantity
