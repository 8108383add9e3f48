"""Study material records and upload validation.

Uploaded bytes are kept inline on the `Material` row (`file_data`);
there is no separate file store. Uploads are limited to 10 MB and to
PDF and Office document types.
"""
from __future__ import annotations

import mimetypes

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator
from django.db import models

from courses.constants import ALLOWED_FILE_TYPES, MATERIAL_TYPES, MAX_FILE_SIZE, SEMESTERS, choices
from courses.models import Course
from reviews.models import YEAR_VALIDATORS

SIZE_MESSAGE = "File size exceeds 10MB limit"
TYPE_MESSAGE = "Invalid file type. Only PDF, DOC, DOCX, PPT, PPTX are allowed."


def upload_content_type(file) -> str:
    """Declared MIME type of an upload, falling back to a guess from its name."""
    declared = (getattr(file, "content_type", None) or "").split(";")[0].strip().lower()
    if declared:
        return declared
    guessed, _ = mimetypes.guess_type(getattr(file, "name", "") or "")
    return guessed or ""


def validate_upload(file) -> None:
    """Reject oversized uploads and anything outside the document allow-list."""
    size = getattr(file, "size", None)
    if size is not None and size > MAX_FILE_SIZE:
        raise ValidationError(SIZE_MESSAGE)
    if upload_content_type(file) not in ALLOWED_FILE_TYPES:
        raise ValidationError(TYPE_MESSAGE)


class Material(models.Model):
    """A study resource attached to a course, uploaded by a signed-in user."""

    course = models.ForeignKey(
        Course,
        to_field="code",
        db_column="course_code",
        on_delete=models.CASCADE,
        related_name="materials",
    )
    uploaded_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="materials")
    uploader_name = models.CharField(max_length=200)
    title = models.CharField(max_length=200, validators=[MinLengthValidator(3)])
    description = models.TextField(blank=True, validators=[MaxLengthValidator(500)])
    type = models.CharField(max_length=20, choices=choices(MATERIAL_TYPES))
    semester = models.CharField(max_length=10, choices=choices(SEMESTERS))
    year = models.PositiveSmallIntegerField(validators=YEAR_VALIDATORS)

    file_type = models.CharField(max_length=100, editable=False)
    file_name = models.CharField(max_length=255, editable=False)
    file_data = models.BinaryField(editable=False)
    file_size = models.PositiveIntegerField(default=0, editable=False)
    download_count = models.PositiveIntegerField(default=0, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} ({self.course_id})"
