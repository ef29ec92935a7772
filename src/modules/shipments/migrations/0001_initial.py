import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ShipmentStatus",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_active", models.BooleanField(default=True)),
                (
                    "name",
                    models.CharField(
                        choices=[
                            ("PENDING", "Pending"),
                            ("PREPARATION", "In preparation"),
                            ("IN_TRANSIT", "In transit"),
                            ("DELIVERED", "Delivered"),
                            ("NOT_DELIVERED", "Not delivered"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        max_length=20,
                        unique=True,
                    ),
                ),
                (
                    "description",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "color",
                    models.CharField(
                        default="#000000",
                        max_length=7,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="Color must be a hex value such as #FFA500.",
                                regex="^#[0-9A-Fa-f]{6}$",
                            )
                        ],
                    ),
                ),
                ("display_order", models.PositiveSmallIntegerField(default=0)),
            ],
            options={
                "db_table": "shipment_statuses",
                "ordering": ["display_order", "name"],
                "verbose_name_plural": "shipment statuses",
            },
        ),
    ]
