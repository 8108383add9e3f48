from __future__ import annotations

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from materials.services import upload_material


@pytest.fixture
def materials(make_course, student):
    comp = make_course("COMP1001")
    math = make_course("MATH2002")

    def _upload(course, title, type_, semester, year):
        return upload_material(
            course=course,
            user=student,
            file=SimpleUploadedFile(f"{title}.pdf", b"%PDF-1.4", content_type="application/pdf"),
            title=title,
            type=type_,
            semester=semester,
            year=year,
        )

    return [
        _upload(comp, "Notes week 1", "Notes", "Autumn", 2024),
        _upload(comp, "Final 2023", "Past Paper", "Spring", 2023),
        _upload(math, "Summary sheet", "Summary", "Autumn", 2024),
    ]


@pytest.mark.django_db
def test_material_list_is_metadata_only(api_client, materials):
    body = api_client.get("/api/materials/").json()
    assert body["success"] is True
    assert body["count"] == 3
    item = body["data"][0]
    assert "fileData" not in item and "file_data" not in item
    assert item["fileType"] == "application/pdf"


@pytest.mark.django_db
@pytest.mark.parametrize(
    "params,titles",
    [
        ({"courseCode": "comp1001"}, {"Notes week 1", "Final 2023"}),
        ({"type": "Summary"}, {"Summary sheet"}),
        ({"semester": "Autumn", "year": "2024"}, {"Notes week 1", "Summary sheet"}),
        ({"courseCode": "COMP1001", "year": "2023"}, {"Final 2023"}),
    ],
)
def test_material_filters(api_client, materials, params, titles):
    body = api_client.get("/api/materials/", params).json()
    assert {m["title"] for m in body["data"]} == titles


@pytest.mark.django_db
def test_material_detail_does_not_count_downloads(api_client, materials):
    material = materials[0]
    r = api_client.get(f"/api/materials/{material.pk}/")
    assert r.status_code == 200
    assert r.json()["data"]["downloadCount"] == 0
    material.refresh_from_db()
    assert material.download_count == 0

    r = api_client.get("/api/materials/9999/")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Material not found"}


@pytest.mark.django_db
def test_materials_are_read_only(api_client, site_admin, materials):
    api_client.force_authenticate(site_admin)
    assert api_client.post("/api/materials/", {}, format="json").status_code == 405


@pytest.mark.django_db
def test_top_courses(api_client, make_course, student, other_student, make_review):
    a = make_course("COMP1001")
    b = make_course("MATH2002")
    make_course("HIST3003")
    make_review(a, student, rating=3)
    make_review(b, student, rating=5)
    make_review(b, other_student, rating=4)

    body = api_client.get("/api/stats/top-courses/").json()
    assert body["success"] is True
    assert [c["courseCode"] for c in body["data"]] == ["MATH2002", "COMP1001"]
    assert body["count"] == 2
    assert body["data"][0]["averageRating"] == 4.5

    body = api_client.get("/api/stats/top-courses/", {"limit": "1"}).json()
    assert body["count"] == 1


@pytest.mark.django_db
def test_recent_reviews_and_difficulty(api_client, course, student, other_student, make_review):
    make_review(course, student, difficulty=1)
    make_review(course, other_student, difficulty=1)

    body = api_client.get("/api/stats/recent-reviews/", {"limit": "5"}).json()
    assert body["count"] == 2

    body = api_client.get("/api/stats/difficulty/").json()
    assert body["data"][0] == {"difficulty": 1, "count": 2}
    assert len(body["data"]) == 5


@pytest.mark.django_db
def test_reviews_by_instructor(api_client, course, student, other_student, make_review):
    mine = make_review(course, student, instructor="Dr. Chan Siu")
    make_review(course, other_student, instructor="Prof. Lee")

    body = api_client.get("/api/instructors/chan/reviews/").json()
    assert body["success"] is True
    assert body["count"] == 1
    assert [r["id"] for r in body["data"]] == [mine.pk]

    body = api_client.get("/api/instructors/nobody/reviews/").json()
    assert body == {"success": True, "data": [], "count": 0}


@pytest.mark.django_db
def test_schema_and_docs_available(api_client):
    r = api_client.get("/api/schema/")
    assert r.status_code == 200
    assert b"CourseHub API" in r.content
    assert api_client.get("/api/docs/").status_code == 200
