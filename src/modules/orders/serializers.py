"""Order DRF serializers (output only).

Input is parsed into the Pydantic DTOs in ``dtos.py``; these serializers
only render ``Order`` rows returned by ``OrderService``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderStatusHistory


class StatusHistorySerializer(serializers.ModelSerializer):
    """Read serializer for order status history records."""

    class Meta:
        model = OrderStatusHistory
        fields = [
            "id",
            "old_status",
            "new_status",
            "changed_by",
            "notes",
            "created_at",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with the status name and full history."""

    status = serializers.CharField(source="shipment_status.name", read_only=True)
    status_history = StatusHistorySerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "order_number",
            "client_id",
            "product_id",
            "carrier_id",
            "route_id",
            "status",
            "quantity",
            "total",
            "order_date",
            "estimated_delivery_date",
            "actual_delivery_date",
            "notes",
            "created_at",
            "updated_at",
            "status_history",
        ]
        read_only_fields = fields
