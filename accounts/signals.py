"""Signals for automatic profile management.

On user creation, create a default `UserProfile` (non-admin). Accounts
created through the admin site or the shell get a profile too, so views
can rely on `user.profile` existing.
"""
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile


@receiver(post_save, sender=User)
def create_user_profile(sender, instance: User, created: bool, **kwargs):  # noqa: D401
    """Create a profile for new users (admin flag off)."""
    if created:
        UserProfile.objects.get_or_create(
            user=instance,
            defaults={"display_name": instance.get_full_name() or instance.username},
        )
