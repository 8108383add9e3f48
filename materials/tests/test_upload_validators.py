from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile

from courses.constants import MAX_FILE_SIZE
from materials.models import Material, validate_upload
from materials.services import upload_material

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class Dummy:
    def __init__(self, name, size, content_type=None):
        self.name = name
        self.size = size
        self.content_type = content_type


def test_validate_upload_size_limit():
    validate_upload(Dummy("x.pdf", MAX_FILE_SIZE, "application/pdf"))
    with pytest.raises(ValidationError) as exc:
        validate_upload(Dummy("x.pdf", MAX_FILE_SIZE + 1, "application/pdf"))
    assert exc.value.messages == ["File size exceeds 10MB limit"]


@pytest.mark.parametrize(
    "name,content_type",
    [
        ("notes.pdf", "application/pdf"),
        ("essay.doc", "application/msword"),
        ("essay.docx", DOCX),
        ("slides.ppt", "application/vnd.ms-powerpoint"),
        ("slides.pptx", "application/vnd.openxmlformats-officedocument.presentationml.presentation"),
        ("notes.pdf", None),
    ],
)
def test_validate_upload_accepts_documents(name, content_type):
    validate_upload(Dummy(name, 1024, content_type))


@pytest.mark.parametrize(
    "name,content_type",
    [("photo.png", "image/png"), ("tool.exe", "application/octet-stream"), ("notes.txt", "text/plain"), ("mystery", None)],
)
def test_validate_upload_rejects_other_types(name, content_type):
    with pytest.raises(ValidationError) as exc:
        validate_upload(Dummy(name, 1024, content_type))
    assert exc.value.messages == ["Invalid file type. Only PDF, DOC, DOCX, PPT, PPTX are allowed."]


@pytest.mark.django_db
def test_upload_stores_bytes_and_metadata(course, student):
    material = upload_material(
        course=course,
        user=student,
        file=SimpleUploadedFile("week1.pdf", b"%PDF-1.4 week one", content_type="application/pdf"),
        title="Week 1",
        description="Lecture notes",
        type="Notes",
        semester="Autumn",
        year=2024,
    )
    stored = Material.objects.get(pk=material.pk)
    assert bytes(stored.file_data) == b"%PDF-1.4 week one"
    assert stored.file_name == "week1.pdf"
    assert stored.file_type == "application/pdf"
    assert stored.file_size == len(b"%PDF-1.4 week one")
    assert stored.uploader_name == "Sam Student"
    assert stored.download_count == 0


@pytest.mark.django_db
def test_oversized_upload_leaves_no_record(course, student):
    big = SimpleUploadedFile("big.pdf", b"0" * (MAX_FILE_SIZE + 1), content_type="application/pdf")
    with pytest.raises(ValidationError):
        upload_material(course=course, user=student, file=big, title="Too big", type="Notes", semester="Autumn", year=2024)
    assert not Material.objects.exists()
