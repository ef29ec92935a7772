"""Shipment status URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.shipments.views import ShipmentStatusViewSet

router = SimpleRouter(trailing_slash=True)
router.register("shipment-statuses", ShipmentStatusViewSet, basename="shipment-status")

urlpatterns = router.urls
