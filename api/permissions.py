"""DRF permission adapters over `accounts.guards`.

When `COURSEHUB_OPEN_API` is on, course and review mutations are open
to anonymous callers (open-data mode); reads are always public.
"""
from __future__ import annotations

from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission

from accounts.guards import can_modify, is_admin, is_authenticated, is_owner


def _open() -> bool:
    return bool(getattr(settings, "COURSEHUB_OPEN_API", False))


class AdminOrReadOnly(BasePermission):
    message = "Admin access required"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS or _open():
            return True
        return is_admin(request.user)


class ReviewPermission(BasePermission):
    """Anyone reads; signed-in users post; owners edit; owners or admins delete."""

    message = "You can only modify your own reviews"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS or _open():
            return True
        return is_authenticated(request.user)

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS or _open():
            return True
        if request.method == "DELETE":
            return can_modify(request.user, obj)
        return is_owner(request.user, obj)


class AuthenticatedAction(BasePermission):
    """Signed-in users only, regardless of method (e.g. marking helpful)."""

    def has_permission(self, request, view):
        return is_authenticated(request.user)
