import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Carrier",
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
                        max_length=100,
                        validators=[django.core.validators.MinLengthValidator(2)],
                    ),
                ),
                ("document", models.CharField(max_length=30, unique=True)),
                (
                    "phone",
                    models.CharField(
                        max_length=20,
                        validators=[
                            django.core.validators.RegexValidator(
                                message="Phone must have 8 to 14 digits, optionally prefixed with '+'.",
                                regex="^\\+?[0-9]{8,14}$",
                            )
                        ],
                    ),
                ),
                (
                    "email",
                    models.EmailField(blank=True, default="", max_length=100),
                ),
                (
                    "vehicle_type",
                    models.CharField(
                        choices=[
                            ("CAR", "Car"),
                            ("MOTORCYCLE", "Motorcycle"),
                            ("VAN", "Van"),
                            ("TRUCK", "Truck"),
                        ],
                        default="CAR",
                        max_length=20,
                    ),
                ),
                (
                    "max_concurrent_orders",
                    models.PositiveIntegerField(
                        default=10,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
            ],
            options={
                "db_table": "carriers",
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(max_concurrent_orders__gte=1),
                        name="carriers_capacity_positive",
                    ),
                ],
            },
        ),
    ]
