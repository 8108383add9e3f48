"""Review write operations.

Every mutation runs in one transaction that first locks the parent
course row, writes the review, then recomputes the course aggregates.
A failure anywhere rolls the whole unit back.
"""
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import F

from accounts.services import display_name, photo_url
from courses.exceptions import Conflict, NotFound
from courses.models import Course
from .models import Review
from .stats import recompute_course_stats

logger = logging.getLogger("coursehub.reviews")

EDITABLE_FIELDS = (
    "semester",
    "year",
    "instructor",
    "rating",
    "difficulty",
    "workload",
    "grade",
    "review_text",
    "pros",
    "cons",
    "tips",
)

DUPLICATE_MESSAGE = "You have already reviewed this course"


def _lock_course(code: str) -> Course:
    return Course.objects.select_for_update().get(code=code)


def get_review(pk) -> Review:
    try:
        return Review.objects.select_related("user").get(pk=pk)
    except (Review.DoesNotExist, ValueError) as exc:
        raise NotFound("Review not found") from exc


def create_review(*, course: Course, user, user_name: str | None = None, user_photo: str | None = None, **data) -> Review:
    fields = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
    with transaction.atomic():
        locked = _lock_course(course.code)
        if Review.objects.filter(course=locked, user=user).exists():
            raise Conflict(DUPLICATE_MESSAGE)
        try:
            with transaction.atomic():
                review = Review.objects.create(
                    course=locked,
                    user=user,
                    user_name=user_name or display_name(user),
                    user_photo=photo_url(user) if user_photo is None else user_photo,
                    **fields,
                )
        except IntegrityError as exc:
            raise Conflict(DUPLICATE_MESSAGE) from exc
        recompute_course_stats(locked.code)
    logger.info("Review created for %s by user %s", locked.code, user.pk)
    return review


def update_review(review: Review, **data) -> Review:
    changed = [field for field in EDITABLE_FIELDS if field in data]
    with transaction.atomic():
        _lock_course(review.course_id)
        for field in changed:
            setattr(review, field, data[field])
        if changed:
            review.save(update_fields=[*changed, "updated_at"])
        recompute_course_stats(review.course_id)
    logger.info("Review %s updated", review.pk)
    return review


def delete_review(review: Review) -> None:
    pk, code = review.pk, review.course_id
    with transaction.atomic():
        _lock_course(code)
        review.delete()
        recompute_course_stats(code)
    logger.info("Review %s deleted", pk)


def mark_helpful(pk) -> int:
    """Atomically add one to a review's helpful count; return the new value."""
    try:
        updated = Review.objects.filter(pk=pk).update(helpful_count=F("helpful_count") + 1)
    except ValueError as exc:
        raise NotFound("Review not found") from exc
    if not updated:
        raise NotFound("Review not found")
    return Review.objects.values_list("helpful_count", flat=True).get(pk=pk)
