import logging

import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from courses.models import Course
from reviews import services as review_services

REVIEW_TEXT = "A well organised course with clear lectures and fair, useful assignments."


@pytest.fixture(autouse=True)
def silence_expected_error_loggers():
    """Reduce noise from expected 4xx/5xx in passing tests.

    Many tests intentionally exercise 400/403/404 paths and the error
    middleware. Lower those loggers to CRITICAL during tests to avoid
    clutter.
    """
    loggers = [logging.getLogger(name) for name in ("django.request", "coursehub.errors")]
    old = [logger.level for logger in loggers]
    for logger in loggers:
        logger.setLevel(logging.CRITICAL)
    try:
        yield
    finally:
        for logger, level in zip(loggers, old):
            logger.setLevel(level)


def _make_user(username: str, *, admin: bool = False, name: str = "") -> User:
    user = User.objects.create_user(username=username, email=f"{username}@example.com", first_name=name)
    if admin or name:
        user.profile.is_admin = admin
        user.profile.display_name = name or username
        user.profile.save(update_fields=["is_admin", "display_name"])
    return user


@pytest.fixture
def student(db):
    return _make_user("student", name="Sam Student")


@pytest.fixture
def other_student(db):
    return _make_user("other", name="Olive Other")


@pytest.fixture
def site_admin(db):
    return _make_user("boss", admin=True, name="Ada Admin")


@pytest.fixture
def make_course(db):
    def _make(code: str = "COMP1001", **overrides) -> Course:
        data = {
            "name": "Introduction to Programming",
            "program": "Computer Science",
            "credits": 3,
            "description": "Fundamentals of programming in Python, from variables to classes.",
            "instructors": ["Dr. Chan"],
        }
        data.update(overrides)
        return Course.objects.create(code=code, **data)

    return _make


@pytest.fixture
def course(make_course):
    return make_course()


@pytest.fixture
def make_review(db):
    def _make(course, user, **overrides):
        data = {
            "semester": "Autumn",
            "year": 2024,
            "instructor": "Dr. Chan",
            "rating": 4,
            "difficulty": 3,
            "workload": 3,
            "review_text": REVIEW_TEXT,
        }
        data.update(overrides)
        return review_services.create_review(course=course, user=user, **data)

    return _make


@pytest.fixture
def api_client():
    return APIClient()
