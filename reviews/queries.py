"""Filter/sort composition for review listings."""
from __future__ import annotations

from typing import Mapping

from django.db.models import Q, QuerySet

from courses.exceptions import InvalidFilter
from courses.queries import read_param, parse_decimal
from .models import Review

REVIEW_SORTS = {
    "rating-high": ["-rating", "-created_at"],
    "rating-low": ["rating", "-created_at"],
    "helpful": ["-helpful_count", "-created_at"],
}
DEFAULT_REVIEW_SORT = ["-created_at"]


def _int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidFilter(f"{name} must be a whole number") from exc


def compose_review_query(filters: Mapping) -> tuple[Q, list[str]]:
    """Return (predicate, ordering) for the given review filters."""
    predicate = Q()

    course_code = read_param(filters, "courseCode")
    if course_code:
        predicate &= Q(course_id=course_code.upper())

    user_id = read_param(filters, "userId")
    if user_id:
        predicate &= Q(user_id=_int(user_id, "userId"))

    semester = read_param(filters, "semester")
    if semester:
        predicate &= Q(semester=semester)

    year = read_param(filters, "year")
    if year:
        predicate &= Q(year=_int(year, "year"))

    instructor = read_param(filters, "instructor")
    if instructor:
        predicate &= Q(instructor__icontains=instructor)

    min_rating = read_param(filters, "minRating")
    if min_rating:
        predicate &= Q(rating__gte=parse_decimal(min_rating, "minRating"))

    ordering = list(REVIEW_SORTS.get(read_param(filters, "sort"), DEFAULT_REVIEW_SORT))
    return predicate, ordering


def find_reviews(filters: Mapping | None = None) -> QuerySet[Review]:
    predicate, ordering = compose_review_query(filters or {})
    return Review.objects.filter(predicate).order_by(*ordering)


def recent_reviews(limit: int = 20) -> QuerySet[Review]:
    return Review.objects.order_by("-created_at")[:limit]


def reviews_by_instructor(name: str) -> QuerySet[Review]:
    return find_reviews({"instructor": name})
