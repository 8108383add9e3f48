"""Local user records for provider identities."""
from __future__ import annotations

import logging

from django.contrib.auth.models import User
from django.db import transaction
from django.utils import timezone

from .models import UserProfile
from .oauth import ProviderProfile

logger = logging.getLogger("coursehub.auth")


def display_name(user) -> str:
    profile = getattr(user, "profile", None)
    return getattr(profile, "display_name", "") or user.get_full_name() or user.username


def photo_url(user) -> str:
    return getattr(getattr(user, "profile", None), "photo_url", "") or ""


@transaction.atomic
def upsert_provider_user(identity: ProviderProfile) -> User:
    """Return the local user for a provider identity, creating it on first login.

    Returning users only get `last_login` refreshed; profile details
    captured at first login are kept.
    """
    now = timezone.now()
    profile = UserProfile.objects.select_related("user").filter(google_sub=identity.subject).first()
    if profile is not None:
        user = profile.user
        user.last_login = now
        user.save(update_fields=["last_login"])
        logger.info("Existing user logged in: %s", user.email)
        return user

    user = User(username=f"google-{identity.subject}"[:150], email=identity.email, last_login=now)
    user.set_unusable_password()
    user.save()
    # The post_save signal has created the profile already
    UserProfile.objects.filter(user=user).update(
        google_sub=identity.subject,
        display_name=identity.name,
        photo_url=identity.picture,
        is_admin=False,
    )
    user.refresh_from_db()
    logger.info("New user created: %s", user.email)
    return user
