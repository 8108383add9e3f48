"""Accounts views: login page, provider hand-off, and logout."""
from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login, logout
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

from . import oauth
from .guards import is_authenticated
from .services import display_name, upsert_provider_user

logger = logging.getLogger("coursehub.auth")

STATE_SESSION_KEY = "oauth_state"


@require_GET
def login_page(request: HttpRequest) -> HttpResponse:
    if is_authenticated(request.user):
        return redirect("courses:list")
    return render(request, "registration/login.html")


@require_GET
def google_start(request: HttpRequest) -> HttpResponse:
    """Send the browser to the provider's consent screen."""
    state = oauth.new_state()
    request.session[STATE_SESSION_KEY] = state
    return redirect(oauth.build_authorization_url(state))


@require_GET
def google_callback(request: HttpRequest) -> HttpResponse:
    """Complete the code flow and sign the user in.

    The `state` round trip ties the callback to the session that started
    it. Any provider failure ends on the login page with a flash message.
    """
    expected = request.session.pop(STATE_SESSION_KEY, None)
    if request.GET.get("error"):
        messages.error(request, "Sign-in was cancelled.")
        return redirect("accounts:login")
    code = request.GET.get("code")
    if not code or not expected or request.GET.get("state") != expected:
        messages.error(request, "Authentication error. Please try again.")
        return redirect("accounts:login")
    try:
        token = oauth.exchange_code(code)
        identity = oauth.fetch_profile(token)
    except oauth.OAuthError as exc:
        logger.warning("Provider sign-in failed: %s", exc)
        messages.error(request, "Authentication error. Please try again.")
        return redirect("accounts:login")

    user = upsert_provider_user(identity)
    login(request, user, backend="django.contrib.auth.backends.ModelBackend")
    messages.success(request, f"Welcome back, {display_name(user)}!")
    return redirect("courses:list")


def logout_view(request: HttpRequest) -> HttpResponse:
    """End the session server-side and drop the session cookie."""
    email = getattr(request.user, "email", "") or "Unknown user"
    logout(request)
    logger.info("User logged out: %s", email)
    response = redirect("index")
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        path=settings.SESSION_COOKIE_PATH,
        domain=settings.SESSION_COOKIE_DOMAIN,
        samesite=settings.SESSION_COOKIE_SAMESITE,
    )
    return response
