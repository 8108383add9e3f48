"""Authorisation guards.

Pure predicates over a user and, where relevant, a resource. Web
decorators (`accounts.decorators`) and API permission classes
(`api.permissions`) are adapters around these; neither adds rules of
its own.
"""
from __future__ import annotations


def is_authenticated(user) -> bool:
    return bool(user is not None and getattr(user, "is_authenticated", False))


def is_admin(user) -> bool:
    if not is_authenticated(user):
        return False
    profile = getattr(user, "profile", None)
    return bool(getattr(profile, "is_admin", False))


def is_owner(user, resource, owner_attr: str = "user_id") -> bool:
    if not is_authenticated(user):
        return False
    return getattr(resource, owner_attr, None) == user.pk


def can_modify(user, resource, owner_attr: str = "user_id") -> bool:
    """Owner of the resource, or an admin."""
    return is_owner(user, resource, owner_attr) or is_admin(user)
