from __future__ import annotations

from rest_framework import serializers

from modules.carriers.models import Carrier


class CarrierSerializer(serializers.ModelSerializer):
    """Carrier representation.

    ``active_orders`` is only rendered when the view passes it in the
    serializer context.
    """

    active_orders = serializers.SerializerMethodField()

    class Meta:
        model = Carrier
        fields = [
            "id",
            "name",
            "document",
            "phone",
            "email",
            "vehicle_type",
            "max_concurrent_orders",
            "active_orders",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_active_orders(self, obj: Carrier) -> int | None:
        return self.context.get("active_orders")
