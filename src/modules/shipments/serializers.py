"""Shipment status DRF serializers (response rendering only).

Input is parsed into Pydantic DTOs by the views.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.shipments.models import ShipmentStatus


class ShipmentStatusSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShipmentStatus
        fields = [
            "id",
            "name",
            "description",
            "color",
            "display_order",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
