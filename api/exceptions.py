"""Map API errors onto the `{success: false, error}` envelope."""
from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from courses.exceptions import CourseHubError


def _flatten(detail, field: str | None = None) -> list[dict]:
    """Turn DRF's nested error detail into a flat `[{field, message}]` list."""
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            name = field if key == "non_field_errors" else (f"{field}.{key}" if field else str(key))
            errors.extend(_flatten(value, name))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, field))
        return errors
    return [{"field": field, "message": str(detail)}]


def envelope_exception_handler(exc, context):
    if isinstance(exc, CourseHubError):
        return Response({"success": False, "error": exc.message}, status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        messages = exc.messages
        return Response(
            {
                "success": False,
                "error": messages[0] if messages else "Invalid request",
                "errors": [{"field": None, "message": m} for m in messages],
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        errors = _flatten(exc.detail)
        body = {
            "success": False,
            "error": errors[0]["message"] if errors else "Invalid request",
            "errors": errors,
        }
    elif isinstance(exc, (Http404, exceptions.NotFound)):
        detail = getattr(exc, "detail", None)
        body = {"success": False, "error": str(detail or "Not found")}
    else:
        detail = getattr(exc, "detail", None) or response.data
        body = {"success": False, "error": str(detail)}
    response.data = body
    return response
