from __future__ import annotations

import pytest
from django.contrib.messages import get_messages

from courses.models import Course
from reviews.models import Review

REVIEW_TEXT = "Challenging but rewarding. The weekly labs made the lecture material stick."


def _post_data(course_code: str, **overrides) -> dict:
    data = {
        "course_code": course_code,
        "semester": "Autumn",
        "year": "2024",
        "instructor": "Dr. Chan",
        "rating": "5",
        "difficulty": "2",
        "workload": "3",
        "grade": "A-",
        "review_text": REVIEW_TEXT,
        "pros": "Engaging\nWell paced",
        "cons": "",
        "tips": "Start the project early.",
    }
    data.update(overrides)
    return data


def _flashes(response) -> list[str]:
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
def test_create_requires_login(client, course):
    r = client.get(f"/reviews/create/?course={course.code}")
    assert r.status_code == 302
    assert r.url == "/auth/login/"
    assert "Please log in to access this page" in _flashes(r)


@pytest.mark.django_db
def test_create_form_prefills_course(client, course, student):
    client.force_login(student)
    r = client.get(f"/reviews/create/?course={course.code.lower()}")
    assert r.status_code == 200
    assert r.context["course"] == course


@pytest.mark.django_db
def test_submit_review_updates_course_stats(client, course, student):
    client.force_login(student)
    r = client.post("/reviews/create/", _post_data(course.code.lower()))
    assert r.status_code == 302
    assert r.url == f"/courses/{course.code}/"
    assert "Review submitted successfully" in _flashes(r)

    review = Review.objects.get(course=course, user=student)
    assert review.pros == ["Engaging", "Well paced"]
    refreshed = Course.objects.get(pk=course.pk)
    assert refreshed.review_count == 1
    assert float(refreshed.average_rating) == 5.0


@pytest.mark.django_db
def test_duplicate_submission_flashes_conflict(client, course, student, make_review):
    make_review(course, student)
    client.force_login(student)
    r = client.post("/reviews/create/", _post_data(course.code))
    assert r.status_code == 302
    assert "You have already reviewed this course" in _flashes(r)
    assert Review.objects.filter(course=course).count() == 1


@pytest.mark.django_db
def test_invalid_submission_rerenders_with_errors(client, course, student):
    client.force_login(student)
    r = client.post("/reviews/create/", _post_data(course.code, review_text="Too short"))
    assert r.status_code == 200
    assert "review_text" in r.context["form"].errors
    assert not Review.objects.exists()


@pytest.mark.django_db
def test_unknown_course_is_a_form_error(client, student):
    client.force_login(student)
    r = client.post("/reviews/create/", _post_data("NOPE9999"))
    assert r.status_code == 200
    assert r.context["form"].errors["course_code"] == ["Course not found"]


@pytest.mark.django_db
def test_only_author_can_edit(client, course, student, other_student, make_review):
    review = make_review(course, student, rating=4)

    client.force_login(other_student)
    r = client.post(f"/reviews/{review.pk}/edit/", {**_post_data(course.code), "rating": "1"})
    assert r.status_code == 302
    review.refresh_from_db()
    assert review.rating == 4

    client.force_login(student)
    r = client.post(f"/reviews/{review.pk}/edit/", {**_post_data(course.code), "rating": "1"})
    assert r.status_code == 302
    review.refresh_from_db()
    assert review.rating == 1
    assert float(Course.objects.get(pk=course.pk).average_rating) == 1.0


@pytest.mark.django_db
def test_admin_can_delete_any_review(client, course, student, other_student, site_admin, make_review):
    review = make_review(course, student)

    client.force_login(other_student)
    client.post(f"/reviews/{review.pk}/delete/")
    assert Review.objects.filter(pk=review.pk).exists()

    client.force_login(site_admin)
    r = client.post(f"/reviews/{review.pk}/delete/")
    assert r.url == f"/courses/{course.code}/"
    assert not Review.objects.filter(pk=review.pk).exists()
    assert Course.objects.get(pk=course.pk).review_count == 0


@pytest.mark.django_db
def test_delete_requires_post(client, course, student, make_review):
    review = make_review(course, student)
    client.force_login(student)
    r = client.get(f"/reviews/{review.pk}/delete/")
    assert r.status_code == 405
    assert Review.objects.filter(pk=review.pk).exists()


@pytest.mark.django_db
def test_helpful_returns_new_count(client, course, student, other_student, make_review):
    review = make_review(course, student)
    client.force_login(other_student)
    assert client.post(f"/reviews/{review.pk}/helpful/").json() == {"success": True, "helpfulCount": 1}
    assert client.post(f"/reviews/{review.pk}/helpful/").json()["helpfulCount"] == 2


@pytest.mark.django_db
def test_helpful_unknown_review_is_404(client, student):
    client.force_login(student)
    r = client.post("/reviews/424242/helpful/")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Review not found"}
