"""Guard decorators for server-rendered views."""
from __future__ import annotations

from functools import wraps

from django.contrib import messages
from django.http import HttpRequest
from django.shortcuts import redirect

from .guards import is_admin, is_authenticated


def guard(check, message: str, redirect_to: str):
    """Run `check(request.user)` before the view.

    On failure the user gets a flash message and a redirect instead of
    the view; nothing else about the request changes.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request: HttpRequest, *args, **kwargs):
            if not check(getattr(request, "user", None)):
                messages.error(request, message)
                return redirect(redirect_to)
            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator


login_required = guard(is_authenticated, "Please log in to access this page", "accounts:login")
admin_required = guard(is_admin, "Admin access required", "index")
