"""Route URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.routes.views import RouteViewSet

router = SimpleRouter(trailing_slash=True)
router.register("routes", RouteViewSet, basename="route")

urlpatterns = router.urls
