import uuid6
from django.db import migrations

DEFAULTS = [
    ("PENDING", "Order received, waiting for preparation", "#FFA500", 1),
    ("PREPARATION", "Order is being prepared for dispatch", "#0000FF", 2),
    ("IN_TRANSIT", "Order is on its way to the client", "#008000", 3),
    ("DELIVERED", "Order delivered to the client", "#008000", 4),
    ("NOT_DELIVERED", "Delivery attempt failed", "#FF0000", 5),
    ("CANCELLED", "Order cancelled", "#FF0000", 6),
]


def seed_statuses(apps, schema_editor):
    ShipmentStatus = apps.get_model("shipments", "ShipmentStatus")
    for name, description, color, order in DEFAULTS:
        ShipmentStatus.objects.get_or_create(
            name=name,
            defaults={
                "id": uuid6.uuid7(),
                "description": description,
                "color": color,
                "display_order": order,
            },
        )


def remove_statuses(apps, schema_editor):
    ShipmentStatus = apps.get_model("shipments", "ShipmentStatus")
    ShipmentStatus.objects.filter(name__in=[d[0] for d in DEFAULTS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("shipments", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_statuses, remove_statuses),
    ]
