from django.apps import AppConfig


class ClientsConfig(AppConfig):
    name = "modules.clients"
    label = "clients"
