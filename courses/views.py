"""Course catalogue pages: list, detail and admin maintenance."""
from __future__ import annotations

from django.contrib import messages
from django.core.paginator import Paginator
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from accounts.decorators import admin_required
from reviews.queries import find_reviews
from materials.services import listing as material_listing
from . import services
from .constants import ITEMS_PER_PAGE, PROGRAMS
from .exceptions import Conflict, InvalidFilter, NotFound
from .forms import CourseForm
from .models import Course
from .queries import COURSE_FILTER_KEYS, COURSE_SORTS, find_courses


def course_list(request: HttpRequest) -> HttpResponse:
    """Public catalogue with search, filters, sort and pagination."""
    filters = {key: request.GET.get(key, "") for key in COURSE_FILTER_KEYS}
    try:
        courses = find_courses(filters)
    except InvalidFilter as exc:
        messages.error(request, exc.message)
        courses = Course.objects.order_by("code")
    page = Paginator(courses, ITEMS_PER_PAGE).get_page(request.GET.get("page"))
    query = request.GET.copy()
    query.pop("page", None)
    ctx = {
        "page": page,
        "courses": page.object_list,
        "filters": filters,
        "programs": PROGRAMS,
        "sorts": list(COURSE_SORTS),
        "querystring": query.urlencode(),
    }
    return render(request, "courses/list.html", ctx)


def course_detail(request: HttpRequest, code: str) -> HttpResponse:
    try:
        course = services.get_course(code)
    except NotFound as exc:
        messages.error(request, exc.message)
        return redirect("courses:list")
    ctx = {
        "course": course,
        "reviews": find_reviews({"courseCode": course.code}),
        "materials": material_listing().filter(course=course),
    }
    return render(request, "courses/detail.html", ctx)


def _course_fields(form: CourseForm) -> dict:
    return {name: form.cleaned_data[name] for name in services.EDITABLE_FIELDS if name in form.cleaned_data}


@admin_required
def course_create(request: HttpRequest) -> HttpResponse:
    if request.method == "POST":
        form = CourseForm(request.POST)
        if form.is_valid():
            try:
                course = services.create_course(code=form.cleaned_data["code"], **_course_fields(form))
            except Conflict as exc:
                form.add_error("code", exc.message)
            else:
                messages.success(request, "Course created successfully")
                return redirect("courses:detail", code=course.code)
        messages.error(request, "Please correct the errors below.")
    else:
        form = CourseForm()
    return render(request, "courses/form.html", {"form": form, "editing": False})


@admin_required
def course_edit(request: HttpRequest, code: str) -> HttpResponse:
    try:
        course = services.get_course(code)
    except NotFound as exc:
        messages.error(request, exc.message)
        return redirect("courses:list")
    if request.method == "POST":
        form = CourseForm(request.POST, instance=course)
        if form.is_valid():
            services.update_course(course, **_course_fields(form))
            messages.success(request, "Course updated successfully")
            return redirect("courses:detail", code=course.code)
        messages.error(request, "Please correct the errors below.")
    else:
        form = CourseForm(instance=course)
    return render(request, "courses/form.html", {"form": form, "course": course, "editing": True})


@admin_required
@require_POST
def course_delete(request: HttpRequest, code: str) -> HttpResponse:
    try:
        course = services.get_course(code)
    except NotFound as exc:
        messages.error(request, exc.message)
        return redirect("courses:list")
    services.delete_course(course)
    messages.success(request, "Course deleted successfully")
    return redirect("courses:list")
