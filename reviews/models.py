"""Course review model.

One review per (course, user). Reviewer name and photo are copied from
the profile at creation so listings do not need a join.
"""
from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models

from courses.constants import GRADES, MAX_RATING, MAX_YEAR, MIN_RATING, MIN_YEAR, SEMESTERS, choices
from courses.models import Course

REVIEW_TEXT_MIN = 50
REVIEW_TEXT_MAX = 2000
LIST_ITEM_MAX = 200
TIPS_MAX = 500

RATING_VALIDATORS = [MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)]
YEAR_VALIDATORS = [MinValueValidator(MIN_YEAR), MaxValueValidator(MAX_YEAR)]


def validate_short_items(value) -> None:
    if not isinstance(value, list):
        raise ValidationError("Expected a list")
    for item in value:
        if not isinstance(item, str):
            raise ValidationError("Each item must be text")
        if len(item) > LIST_ITEM_MAX:
            raise ValidationError(f"Each item must be at most {LIST_ITEM_MAX} characters")


class Review(models.Model):
    course = models.ForeignKey(
        Course,
        to_field="code",
        db_column="course_code",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews")
    user_name = models.CharField(max_length=200)
    user_photo = models.URLField(max_length=500, blank=True)

    semester = models.CharField(max_length=10, choices=choices(SEMESTERS))
    year = models.PositiveSmallIntegerField(validators=YEAR_VALIDATORS)
    instructor = models.CharField(max_length=100)
    rating = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    difficulty = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    workload = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    grade = models.CharField(max_length=5, choices=choices(GRADES), blank=True)
    review_text = models.TextField(
        validators=[MinLengthValidator(REVIEW_TEXT_MIN), MaxLengthValidator(REVIEW_TEXT_MAX)],
    )
    pros = models.JSONField(default=list, blank=True, validators=[validate_short_items])
    cons = models.JSONField(default=list, blank=True, validators=[validate_short_items])
    tips = models.TextField(blank=True, validators=[MaxLengthValidator(TIPS_MAX)])
    helpful_count = models.PositiveIntegerField(default=0, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["course", "user"], name="unique_review_per_course_user"),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.course_id}:{self.user_id}={self.rating}"
