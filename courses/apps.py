from django.apps import AppConfig


class CoursesConfig(AppConfig):
    """App configuration for the course catalogue."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "courses"

