"""Course aggregate statistics.

`recompute_course_stats` is the only writer of a course's aggregate
fields. Callers run it inside the same transaction as the review write
that triggered it, with the course row already locked, so two writers
for one course are serialised and never persist a stale mean.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.db.models import Count

from courses.models import Course
from .models import Review

logger = logging.getLogger("coursehub.stats")

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def mean(values: list[int]) -> Decimal:
    """Arithmetic mean rounded half-up to two decimals (0 for no values)."""
    if not values:
        return ZERO
    return (Decimal(sum(values)) / Decimal(len(values))).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


@transaction.atomic
def recompute_course_stats(course_code: str) -> Course:
    """Rewrite the four aggregate fields of a course from its reviews."""
    course = Course.objects.select_for_update().get(code=course_code)
    rows = list(Review.objects.filter(course_id=course.code).values_list("rating", "difficulty", "workload"))

    course.review_count = len(rows)
    course.average_rating = mean([r[0] for r in rows])
    course.average_difficulty = mean([r[1] for r in rows])
    course.average_workload = mean([r[2] for r in rows])
    course.save(update_fields=["average_rating", "review_count", "average_difficulty", "average_workload", "updated_at"])

    logger.info("Statistics updated for %s (%d reviews)", course.code, course.review_count)
    return course


def difficulty_distribution() -> list[dict]:
    """Number of reviews per difficulty value, 1 through 5."""
    counts = {
        row["difficulty"]: row["count"]
        for row in Review.objects.order_by().values("difficulty").annotate(count=Count("id"))
    }
    return [{"difficulty": level, "count": counts.get(level, 0)} for level in range(1, 6)]
