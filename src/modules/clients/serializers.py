"""Client DRF serializers (response rendering only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.clients.models import Client


class ClientSerializer(serializers.ModelSerializer):
    is_active = serializers.BooleanField(read_only=True)

    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "address",
            "status",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
