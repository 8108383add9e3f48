"""Material storage and retrieval."""
from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import F

from accounts.services import display_name
from courses.exceptions import NotFound
from courses.models import Course
from .models import Material, upload_content_type, validate_upload

logger = logging.getLogger("coursehub.materials")

METADATA_FIELDS = ("title", "description", "type", "semester", "year")


def listing():
    """Materials without their bytes, for lists and API metadata."""
    return Material.objects.defer("file_data")


def get_material(pk) -> Material:
    """Metadata lookup; does not count as a download."""
    try:
        return listing().get(pk=pk)
    except (Material.DoesNotExist, ValueError) as exc:
        raise NotFound("Material not found") from exc


def upload_material(*, course: Course, user, file, **data) -> Material:
    """Validate the upload, then store it with its bytes in a single insert."""
    validate_upload(file)
    fields = {k: v for k, v in data.items() if k in METADATA_FIELDS}
    material = Material(
        course=course,
        uploaded_by=user,
        uploader_name=display_name(user),
        file_type=upload_content_type(file),
        file_name=getattr(file, "name", "") or "upload",
        file_size=file.size,
        **fields,
    )
    material.file_data = b"".join(file.chunks())
    material.full_clean(exclude=["file_data"])
    material.save()
    logger.info("Material uploaded: %s for %s by user %s", material.pk, course.code, user.pk)
    return material


@transaction.atomic
def open_for_download(pk) -> Material:
    """Count a download and return the material with its bytes."""
    try:
        updated = Material.objects.filter(pk=pk).update(download_count=F("download_count") + 1)
    except ValueError as exc:
        raise NotFound("Material not found") from exc
    if not updated:
        raise NotFound("Material not found")
    return Material.objects.get(pk=pk)


def delete_material(material: Material) -> None:
    pk, code = material.pk, material.course_id
    material.delete()
    logger.info("Material deleted: %s from %s", pk, code)
