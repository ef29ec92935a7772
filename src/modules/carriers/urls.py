"""Carrier URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.carriers.views import CarrierViewSet

router = SimpleRouter(trailing_slash=True)
router.register("carriers", CarrierViewSet, basename="carrier")

urlpatterns = router.urls
