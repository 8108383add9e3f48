"""Google OAuth 2.0 client (authorisation code flow).

Credential checks happen entirely at the provider. This module only
builds the consent URL, swaps the returned code for an access token and
reads the OpenID userinfo document.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from urllib.parse import urlencode

import requests
from django.conf import settings

logger = logging.getLogger("coursehub.auth")

AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = "openid email profile"


class OAuthError(Exception):
    """The provider round trip failed or returned something unusable."""


@dataclass(frozen=True)
class ProviderProfile:
    subject: str
    email: str
    name: str
    picture: str = ""


def new_state() -> str:
    return secrets.token_urlsafe(16)


def build_authorization_url(state: str) -> str:
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "redirect_uri": settings.GOOGLE_CALLBACK_URL,
        "response_type": "code",
        "scope": SCOPES,
        "state": state,
        "prompt": "select_account",
    }
    return f"{AUTHORIZATION_URL}?{urlencode(params)}"


def exchange_code(code: str) -> str:
    """Exchange an authorisation code for an access token."""
    data = {
        "grant_type": "authorization_code",
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "code": code,
        "redirect_uri": settings.GOOGLE_CALLBACK_URL,
    }
    try:
        response = requests.post(TOKEN_URL, data=data, timeout=settings.GOOGLE_OAUTH_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Token exchange failed: %s", exc)
        raise OAuthError("Token exchange failed") from exc
    token = payload.get("access_token")
    if not token:
        raise OAuthError("Provider returned no access token")
    return token


def fetch_profile(access_token: str) -> ProviderProfile:
    headers = {"Authorization": f"Bearer {access_token}"}
    try:
        response = requests.get(USERINFO_URL, headers=headers, timeout=settings.GOOGLE_OAUTH_TIMEOUT)
        response.raise_for_status()
        info = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("User info fetch failed: %s", exc)
        raise OAuthError("User info fetch failed") from exc
    subject = info.get("sub")
    email = info.get("email")
    if not subject or not email:
        raise OAuthError("Provider profile is missing subject or e-mail")
    return ProviderProfile(
        subject=str(subject),
        email=email,
        name=info.get("name") or email.split("@")[0],
        picture=info.get("picture") or "",
    )
