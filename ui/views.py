from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from courses.queries import top_rated_courses

HOME_TOP_COURSES = 6


def index(request: HttpRequest) -> HttpResponse:
    """Landing page with the best-rated courses."""
    return render(request, "index.html", {"top_courses": top_rated_courses(HOME_TOP_COURSES)})


def page_not_found(request: HttpRequest, exception=None) -> HttpResponse:
    return render(request, "404.html", status=404)
