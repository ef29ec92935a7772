"""Product DRF serializers (response rendering).

Business logic lives in the Service Layer, which receives Pydantic DTOs
from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "name",
            "description",
            "price",
            "stock",
            "stock_minimum",
            "is_low_stock",
            "category",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
