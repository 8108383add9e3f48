from __future__ import annotations

from .guards import is_admin


def current_profile(request):
    """Expose the signed-in user's profile and admin tier to templates."""
    user = getattr(request, "user", None)
    return {
        "profile": getattr(user, "profile", None) if user is not None and user.is_authenticated else None,
        "is_admin": is_admin(user),
    }
