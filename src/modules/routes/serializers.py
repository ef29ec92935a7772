from __future__ import annotations

from rest_framework import serializers

from modules.routes.models import Route


class RouteSerializer(serializers.ModelSerializer):
    carrier_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Route
        fields = [
            "id",
            "code",
            "origin",
            "destination",
            "distance_km",
            "start_hour",
            "end_hour",
            "carrier_id",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
