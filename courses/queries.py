"""Filter/sort composition for course listings.

`compose_course_query` turns user-supplied filter parameters into a
`Q` predicate and an ordering list. It only reads the mapping it is
given; absent or blank keys add no constraint.
"""
from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Mapping

from django.db.models import Q, QuerySet

from .exceptions import InvalidFilter
from .models import Course

# Bucket bounds on average difficulty. "medium" excludes both edges so a
# course lands in exactly one bucket.
DIFFICULTY_BUCKETS = {
    "easy": Q(average_difficulty__lte=2),
    "medium": Q(average_difficulty__gt=2, average_difficulty__lt=4),
    "hard": Q(average_difficulty__gte=4),
}

COURSE_SORTS = {
    "rating-high": ["-average_rating", "code"],
    "rating-low": ["average_rating", "code"],
    "reviews-most": ["-review_count", "code"],
    "difficulty-easy": ["average_difficulty", "code"],
    "difficulty-hard": ["-average_difficulty", "code"],
}
DEFAULT_COURSE_SORT = ["code"]

COURSE_FILTER_KEYS = ("search", "program", "minRating", "difficulty", "instructor", "sort")


def read_param(filters: Mapping, key: str) -> str:
    value = filters.get(key)
    if value is None:
        return ""
    return str(value).strip()


def parse_decimal(value: str, name: str) -> Decimal:
    try:
        number = Decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidFilter(f"{name} must be a number") from exc
    if not number.is_finite():
        raise InvalidFilter(f"{name} must be a number")
    return number


def json_text(value: str) -> str:
    """The form `value` takes inside stored JSON text (escaped, unquoted)."""
    return json.dumps(value)[1:-1]


def compose_course_query(filters: Mapping) -> tuple[Q, list[str]]:
    """Return (predicate, ordering) for the given course filters."""
    predicate = Q()

    search = read_param(filters, "search")
    if search:
        predicate &= Q(code__icontains=search) | Q(name__icontains=search)

    program = read_param(filters, "program")
    if program:
        predicate &= Q(program=program)

    min_rating = read_param(filters, "minRating")
    if min_rating:
        predicate &= Q(average_rating__gte=parse_decimal(min_rating, "minRating"))

    difficulty = read_param(filters, "difficulty").lower()
    if difficulty:
        if difficulty not in DIFFICULTY_BUCKETS:
            raise InvalidFilter("difficulty must be one of: easy, medium, hard")
        predicate &= DIFFICULTY_BUCKETS[difficulty]

    instructor = read_param(filters, "instructor")
    if instructor:
        # Instructors are stored as JSON text with non-ASCII characters escaped
        predicate &= Q(instructors__icontains=json_text(instructor))

    ordering = list(COURSE_SORTS.get(read_param(filters, "sort"), DEFAULT_COURSE_SORT))
    return predicate, ordering


def find_courses(filters: Mapping | None = None) -> QuerySet[Course]:
    predicate, ordering = compose_course_query(filters or {})
    return Course.objects.filter(predicate).order_by(*ordering)


def top_rated_courses(limit: int = 10) -> QuerySet[Course]:
    """Courses with at least one review, best rated first."""
    return Course.objects.filter(review_count__gt=0).order_by("-average_rating", "-review_count", "code")[:limit]
