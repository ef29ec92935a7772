from django.apps import AppConfig


class RoutesConfig(AppConfig):
    name = "modules.routes"
    label = "routes"
