import itertools
from decimal import Decimal

import pytest

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from rest_framework.test import APIClient

from modules.carriers.models import Carrier
from modules.carriers.repositories import CarrierDjangoRepository
from modules.clients.models import Client
from modules.clients.repositories import ClientDjangoRepository
from modules.core.permissions import Role
from modules.orders.dtos import CreateOrderDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.products.models import Product
from modules.products.repositories import ProductDjangoRepository
from modules.routes.models import Route
from modules.routes.repositories import RouteDjangoRepository
from modules.shipments.repositories import ShipmentStatusDjangoRepository
from modules.shipments.services import ShipmentStatusService

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


def _client_for(username, *roles):
    user = User.objects.create_user(username=username, password="testpass123")
    for role in roles:
        group, _ = Group.objects.get_or_create(name=role)
        user.groups.add(group)
    client = APIClient()
    client.force_authenticate(user=user)
    client.user = user
    return client


@pytest.fixture()
def viewer_client():
    """Authenticated user without any role."""
    return _client_for("viewer")


@pytest.fixture()
def operator_client():
    return _client_for("operator", Role.OPERATOR)


@pytest.fixture()
def manager_client():
    return _client_for("manager", Role.OPERATOR, Role.MANAGER)


# ---------------------------------------------------------------------------
# Entity factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def statuses():
    """The six default statuses keyed by name (seeded if a flush removed them)."""
    ShipmentStatusService(ShipmentStatusDjangoRepository()).initialize_defaults()
    repo = ShipmentStatusDjangoRepository()
    return {
        name: repo.get_by_name(name)
        for name in ("PENDING", "PREPARATION", "IN_TRANSIT", "DELIVERED", "NOT_DELIVERED", "CANCELLED")
    }


@pytest.fixture()
def make_client():
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        data = {
            "name": f"Client {n}",
            "email": f"client{n}@example.com",
            "phone": "+5511999990000",
            "address": f"Main Street {n}",
        }
        data.update(overrides)
        return Client.objects.create(**data)

    return _make


@pytest.fixture()
def make_product():
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        data = {
            "code": f"PRD-{n:03d}",
            "name": f"Product {n}",
            "price": Decimal("10.00"),
            "stock": 10,
            "stock_minimum": 2,
        }
        data.update(overrides)
        return Product.objects.create(**data)

    return _make


@pytest.fixture()
def make_carrier():
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        data = {
            "name": f"Carrier {n}",
            "document": f"DOC-{n:04d}",
            "phone": "+551130000000",
            "max_concurrent_orders": 10,
        }
        data.update(overrides)
        return Carrier.objects.create(**data)

    return _make


@pytest.fixture()
def make_route(make_carrier):
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        data = {
            "code": f"RT-{n:03d}",
            "origin": "Warehouse",
            "destination": f"Hub {n}",
            "start_hour": 0,
            "end_hour": 23,
        }
        data.update(overrides)
        if "carrier" not in data:
            data["carrier"] = make_carrier()
        return Route.objects.create(**data)

    return _make


@pytest.fixture()
def order_service():
    return OrderService(
        order_repository=OrderDjangoRepository(),
        client_repository=ClientDjangoRepository(),
        product_repository=ProductDjangoRepository(),
        carrier_repository=CarrierDjangoRepository(),
        route_repository=RouteDjangoRepository(),
        status_repository=ShipmentStatusDjangoRepository(),
    )


@pytest.fixture()
def make_order(order_service, statuses, make_client, make_product, make_carrier, make_route):
    """Create an order through ``OrderService`` with fresh references by default."""

    def _make(**overrides):
        carrier = overrides.pop("carrier", None) or make_carrier()
        product = overrides.pop("product", None) or make_product()
        client = overrides.pop("client", None) or make_client()
        route = overrides.pop("route", None) or make_route(carrier=carrier)
        data = {
            "client_id": client.id,
            "product_id": product.id,
            "carrier_id": carrier.id,
            "route_id": route.id,
            "quantity": 1,
        }
        data.update(overrides)
        return order_service.create_order(CreateOrderDTO(**data))

    return _make
