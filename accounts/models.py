"""Accounts models: user profile linked to the identity provider.

Defines a `UserProfile` associated one-to-one with Django's `User`. It
records the provider subject id used to recognise returning users, the
display details shown next to reviews, and the admin flag. The profile
is created automatically on user creation.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models


class UserProfile(models.Model):
    """Profile linked to a Django auth user.

    - `google_sub`: the provider's stable subject identifier
    - `is_admin`: second authorisation tier; only changed out of band
    """

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    google_sub = models.CharField(max_length=255, unique=True, null=True, blank=True)
    display_name = models.CharField(max_length=200, blank=True)
    photo_url = models.URLField(max_length=500, blank=True)
    is_admin = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover (string repr convenience)
        return f"Profile<{self.user.username}:{'admin' if self.is_admin else 'user'}>"
