from __future__ import annotations

from decimal import Decimal

import pytest
from django.contrib.messages import get_messages

from courses.models import Course
from reviews.models import Review

VALID_FORM = {
    "code": "DATA3001",
    "name": "Machine Learning",
    "program": "Data Science and Artificial Intelligence",
    "credits": "3",
    "description": "Supervised and unsupervised learning with hands-on labs in Python.",
    "prerequisites": "comp1001, math2002",
    "instructors": "Dr. Chan,  Prof. Lee ,",
}


def _flashes(response) -> list[str]:
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
def test_list_is_public_and_paginated_by_twelve(client, make_course):
    for i in range(14):
        make_course(f"COMP{1000 + i}")
    r = client.get("/courses/")
    assert r.status_code == 200
    assert len(r.context["courses"]) == 12
    assert r.context["page"].paginator.count == 14
    r = client.get("/courses/?page=2")
    assert len(r.context["courses"]) == 2


@pytest.mark.django_db
def test_list_applies_filters(client, make_course):
    hard = make_course("PHYS3003")
    make_course("COMP1001")
    Course.objects.filter(pk=hard.pk).update(average_difficulty=Decimal("4.50"), review_count=2)
    r = client.get("/courses/?difficulty=hard")
    assert [c.code for c in r.context["courses"]] == ["PHYS3003"]


@pytest.mark.django_db
def test_invalid_filter_flashes_and_shows_everything(client, make_course):
    make_course("COMP1001")
    make_course("MATH2002")
    r = client.get("/courses/?minRating=lots")
    assert r.status_code == 200
    assert "minRating must be a number" in _flashes(r)
    assert len(r.context["courses"]) == 2


@pytest.mark.django_db
def test_detail_shows_reviews_and_materials(client, course, student, make_review):
    make_review(course, student)
    r = client.get("/courses/comp1001/")
    assert r.status_code == 200
    assert r.context["course"] == course
    assert len(r.context["reviews"]) == 1
    assert list(r.context["materials"]) == []


@pytest.mark.django_db
def test_unknown_course_redirects_with_flash(client):
    r = client.get("/courses/NOPE0000/")
    assert r.status_code == 302
    assert r.url == "/courses/"
    assert "Course not found" in _flashes(r)


@pytest.mark.django_db
@pytest.mark.security
def test_create_requires_admin(client, student):
    r = client.get("/courses/create/")
    assert r.status_code == 302 and r.url == "/"

    client.force_login(student)
    r = client.post("/courses/create/", VALID_FORM)
    assert r.status_code == 302 and r.url == "/"
    assert "Admin access required" in _flashes(r)
    assert not Course.objects.filter(code="DATA3001").exists()


@pytest.mark.django_db
def test_admin_creates_course(client, site_admin):
    client.force_login(site_admin)
    r = client.post("/courses/create/", VALID_FORM)
    assert r.status_code == 302
    assert r.url == "/courses/DATA3001/"
    course = Course.objects.get(code="DATA3001")
    assert course.prerequisites == ["COMP1001", "MATH2002"]
    assert course.instructors == ["Dr. Chan", "Prof. Lee"]
    assert course.review_count == 0


@pytest.mark.django_db
def test_lowercase_code_is_rejected_not_uppercased(client, site_admin):
    client.force_login(site_admin)
    r = client.post("/courses/create/", {**VALID_FORM, "code": "comp123"})
    assert r.status_code == 200
    assert "code" in r.context["form"].errors
    assert not Course.objects.filter(code__iexact="comp123").exists()


@pytest.mark.django_db
def test_short_description_is_rejected(client, site_admin):
    client.force_login(site_admin)
    r = client.post("/courses/create/", {**VALID_FORM, "description": "Too short."})
    assert r.status_code == 200
    assert "description" in r.context["form"].errors


@pytest.mark.django_db
def test_duplicate_code_is_a_form_error(client, site_admin, make_course):
    make_course("DATA3001")
    client.force_login(site_admin)
    r = client.post("/courses/create/", VALID_FORM)
    assert r.status_code == 200
    assert "code" in r.context["form"].errors
    assert Course.objects.filter(code="DATA3001").count() == 1


@pytest.mark.django_db
def test_edit_keeps_code_fixed(client, site_admin, course):
    client.force_login(site_admin)
    r = client.post(f"/courses/{course.code}/edit/", {**VALID_FORM, "code": "HACK9999", "name": "Renamed course"})
    assert r.status_code == 302
    course.refresh_from_db()
    assert course.code == "COMP1001"
    assert course.name == "Renamed course"
    assert not Course.objects.filter(code="HACK9999").exists()


@pytest.mark.django_db
def test_admin_delete_cascades(client, site_admin, course, student, make_review):
    make_review(course, student)
    client.force_login(site_admin)
    r = client.post(f"/courses/{course.code}/delete/")
    assert r.status_code == 302
    assert r.url == "/courses/"
    assert "Course deleted successfully" in _flashes(r)
    assert not Course.objects.exists()
    assert not Review.objects.exists()
