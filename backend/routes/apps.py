from django.apps import AppConfig


class RoutesConfig(AppConfig):
    name = "backend.routes"
    label = "routes"
