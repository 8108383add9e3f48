"""Security headers and last-resort error handling for every request."""
from __future__ import annotations

import logging
import traceback

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404, JsonResponse
from django.shortcuts import render
from django.utils.deprecation import MiddlewareMixin

error_logger = logging.getLogger("coursehub.errors")


class ContentSecurityPolicyMiddleware(MiddlewareMixin):
    """Add a basic Content-Security-Policy header.

    This policy avoids inline scripts/styles to reduce XSS risk. The API
    documentation page loads Swagger UI from its CDN and is given a
    relaxed policy of its own.
    """

    def process_response(self, request, response):  # noqa: D401
        if request.path.startswith("/api/docs/"):
            csp = (
                "default-src 'self'; "
                "img-src 'self' data: https://cdn.jsdelivr.net; "
                "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
                "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
                "frame-ancestors 'none'"
            )
        else:
            csp = (
                "default-src 'self'; "
                # Profile photos come from the identity provider
                "img-src 'self' https: data:; "
                "script-src 'self'; "
                "style-src 'self'; "
                "frame-ancestors 'none'"
            )
        response["Content-Security-Policy"] = csp
        return response


def wants_json(request) -> bool:
    """Return True for API calls, XHR, and clients that ask for JSON."""
    if request.path.startswith("/api/"):
        return True
    if request.headers.get("x-requested-with") == "XMLHttpRequest":
        return True
    return "json" in request.headers.get("accept", "")


class ErrorHandlingMiddleware:
    """Last-resort handler for exceptions that escape a view.

    Recoverable errors (validation, not-found, permission) are handled
    close to their source; whatever arrives here is unexpected. It is
    logged with request context and answered with a generic 500, with
    the exception message exposed only when DEBUG is on.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        # Http404/PermissionDenied keep Django's own handling
        if isinstance(exception, (Http404, PermissionDenied)):
            return None

        error_logger.error(
            "Unhandled %s: %s",
            type(exception).__name__,
            exception,
            extra={
                "path": request.get_full_path(),
                "method": request.method,
                "remote_addr": request.META.get("REMOTE_ADDR"),
                "stack": "".join(traceback.format_exception(type(exception), exception, exception.__traceback__)),
            },
            exc_info=exception,
        )

        message = str(exception) if settings.DEBUG else "Something went wrong. Please try again later."
        if wants_json(request):
            body = {"success": False, "error": message}
            if settings.DEBUG:
                body["stack"] = traceback.format_exception(type(exception), exception, exception.__traceback__)
            return JsonResponse(body, status=500)
        return render(request, "500.html", {"message": message}, status=500)
