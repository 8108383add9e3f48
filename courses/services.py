"""Course write operations."""
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from .exceptions import Conflict, NotFound
from .models import Course

logger = logging.getLogger("coursehub.courses")

# Fields a caller may set; the code is fixed at creation and the
# aggregates belong to the stats routine.
EDITABLE_FIELDS = ("name", "program", "credits", "description", "prerequisites", "instructors")


def get_course(code: str) -> Course:
    try:
        return Course.objects.get(code=(code or "").upper())
    except Course.DoesNotExist as exc:
        raise NotFound("Course not found") from exc


def create_course(*, code: str, **data) -> Course:
    fields = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
    if Course.objects.filter(code=code).exists():
        raise Conflict(f"Course {code} already exists")
    try:
        with transaction.atomic():
            course = Course.objects.create(code=code, **fields)
    except IntegrityError as exc:
        raise Conflict(f"Course {code} already exists") from exc
    logger.info("Course created: %s", course.code)
    return course


def update_course(course: Course, **data) -> Course:
    changed = []
    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(course, field, data[field])
            changed.append(field)
    if changed:
        course.save(update_fields=[*changed, "updated_at"])
        logger.info("Course updated: %s", course.code)
    return course


def delete_course(course: Course) -> None:
    """Delete a course together with its reviews and materials."""
    code = course.code
    with transaction.atomic():
        course.reviews.all().delete()
        course.materials.all().delete()
        course.delete()
    logger.info("Course deleted: %s", code)
