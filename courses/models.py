"""Course catalogue model.

A `Course` is the aggregation root: reviews and materials reference it
by its code. The four aggregate fields are owned by
`reviews.stats.recompute_course_stats` and are never edited directly.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator, RegexValidator
from django.db import models

from .constants import PROGRAMS, choices

COURSE_CODE_MIN = 6
COURSE_CODE_MAX = 15

validate_course_code_chars = RegexValidator(
    r"^[A-Z0-9]+$",
    "Course code must contain only uppercase letters and numbers",
)


def validate_course_code(value: str) -> None:
    """Check length and character set exactly as supplied (no uppercasing)."""
    if not COURSE_CODE_MIN <= len(value or "") <= COURSE_CODE_MAX:
        raise ValidationError(f"Course code must be between {COURSE_CODE_MIN} and {COURSE_CODE_MAX} characters")
    validate_course_code_chars(value)


def _string_list(value) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError("Expected a list of strings")


class Course(models.Model):
    """A catalogued academic unit students can review."""

    code = models.CharField(max_length=COURSE_CODE_MAX, unique=True, validators=[validate_course_code])
    name = models.CharField(max_length=200, validators=[MinLengthValidator(3)])
    program = models.CharField(max_length=100, choices=choices(PROGRAMS))
    credits = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(10)])
    description = models.TextField()
    prerequisites = models.JSONField(default=list, blank=True, validators=[_string_list])
    instructors = models.JSONField(default=list, blank=True, validators=[_string_list])

    # Aggregates: recomputed from the review set, never set by hand
    average_rating = models.DecimalField(max_digits=3, decimal_places=2, default=0, editable=False)
    review_count = models.PositiveIntegerField(default=0, editable=False)
    average_difficulty = models.DecimalField(max_digits=3, decimal_places=2, default=0, editable=False)
    average_workload = models.DecimalField(max_digits=3, decimal_places=2, default=0, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["code"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code} {self.name}"
