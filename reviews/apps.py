from django.apps import AppConfig


class ReviewsConfig(AppConfig):
    """App configuration for course reviews and statistics."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "reviews"
