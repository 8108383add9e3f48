from django.apps import AppConfig


class ApiConfig(AppConfig):
    """App configuration for the JSON API (courses, reviews, materials, stats)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
