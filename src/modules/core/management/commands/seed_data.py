from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from modules.carriers.models import Carrier, VehicleType
from modules.clients.models import Client
from modules.core.permissions import Role
from modules.products.models import Product
from modules.routes.models import Route
from modules.shipments.repositories import ShipmentStatusDjangoRepository
from modules.shipments.services import ShipmentStatusService


class Command(BaseCommand):
    help = "Seed database with realistic development data (idempotent)."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        statuses = ShipmentStatusService(ShipmentStatusDjangoRepository()).initialize_defaults()
        clients = self._seed_clients()
        products = self._seed_products()
        carriers = self._seed_carriers()
        routes = self._seed_routes(carriers)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"statuses_created={len(statuses)}, "
                f"clients={len(clients)}, "
                f"products={len(products)}, "
                f"carriers={len(carriers)}, "
                f"routes={len(routes)}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        operators, _ = Group.objects.get_or_create(name=Role.OPERATOR)
        managers, _ = Group.objects.get_or_create(name=Role.MANAGER)

        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="manager").exists():
            user = User.objects.create_user("manager", password="manager123", is_staff=True)
            user.groups.add(managers, operators)
            created += 1
        if not User.objects.filter(username="operator").exists():
            user = User.objects.create_user("operator", password="operator123")
            user.groups.add(operators)
            created += 1
        return created

    def _seed_clients(self) -> list[Client]:
        self.stdout.write("Creating clients...")
        clients: list[Client] = []
        seed_clients = [
            ("Ana Souza", "ana@example.com", "+5511988880001", "Rua das Flores 10"),
            ("Bruno Lima", "bruno@example.com", "+5511988880002", "Av. Central 200"),
            ("Carla Mendes", "carla@example.com", "+5511988880003", "Rua do Porto 7"),
            ("Daniel Costa", "daniel@example.com", "+5511988880004", "Praca da Se 1"),
            ("Helena Ferreira", "helena@example.com", "+5511988880005", "Rua Azul 55"),
        ]
        for name, email, phone, address in seed_clients:
            client, _ = Client.objects.get_or_create(
                email=email,
                defaults={"name": name, "phone": phone, "address": address},
            )
            clients.append(client)
        self.stdout.write(self.style.SUCCESS("Creating clients... Done!"))
        return clients

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("ELEC-001", "Monitor 27in", "Electronics", Decimal("1299.90")),
            ("ELEC-002", "Mechanical Keyboard", "Electronics", Decimal("399.90")),
            ("ELEC-003", "Gaming Mouse", "Electronics", Decimal("249.90")),
            ("FURN-001", "Office Desk", "Furniture", Decimal("899.00")),
            ("FURN-002", "Ergonomic Chair", "Furniture", Decimal("1499.00")),
            ("OFF-001", "A4 Paper Box", "Office", Decimal("29.90")),
            ("OFF-002", "Notebook Stand", "Office", Decimal("149.90")),
        ]
        for code, name, category, price in catalog:
            product, _ = Product.objects.get_or_create(
                code=code,
                defaults={
                    "name": name,
                    "category": category,
                    "price": price,
                    "stock": random.randint(10, 200),
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_carriers(self) -> list[Carrier]:
        self.stdout.write("Creating carriers...")
        carriers: list[Carrier] = []
        fleet = [
            ("Rapido Express", "ABC-1234", VehicleType.MOTORCYCLE, 5),
            ("Carga Pesada", "TRK-9001", VehicleType.TRUCK, 20),
            ("Van Urbana", "VAN-4321", VehicleType.VAN, 10),
        ]
        for index, (name, document, vehicle_type, capacity) in enumerate(fleet, start=1):
            carrier, _ = Carrier.objects.get_or_create(
                document=document,
                defaults={
                    "name": name,
                    "phone": f"+551130000{index:03d}",
                    "vehicle_type": vehicle_type,
                    "max_concurrent_orders": capacity,
                },
            )
            carriers.append(carrier)
        self.stdout.write(self.style.SUCCESS("Creating carriers... Done!"))
        return carriers

    def _seed_routes(self, carriers: list[Carrier]) -> list[Route]:
        self.stdout.write("Creating routes...")
        routes: list[Route] = []
        if not carriers:
            self.stdout.write(self.style.WARNING("Skipping routes (no carriers)."))
            return routes

        legs = [
            ("SP-CAMP", "Sao Paulo", "Campinas", Decimal("95.00")),
            ("SP-SANT", "Sao Paulo", "Santos", Decimal("72.00")),
            ("RJ-NIT", "Rio de Janeiro", "Niteroi", Decimal("18.50")),
        ]
        for (code, origin, destination, distance), carrier in zip(legs, carriers):
            route, _ = Route.objects.get_or_create(
                code=code,
                defaults={
                    "origin": origin,
                    "destination": destination,
                    "distance_km": distance,
                    "carrier": carrier,
                },
            )
            routes.append(route)
        self.stdout.write(self.style.SUCCESS("Creating routes... Done!"))
        return routes
