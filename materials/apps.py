from django.apps import AppConfig


class MaterialsConfig(AppConfig):
    """App configuration for study materials (inline file storage)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "materials"

