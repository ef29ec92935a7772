from django.apps import AppConfig


class CarriersConfig(AppConfig):
    name = "modules.carriers"
    label = "carriers"
