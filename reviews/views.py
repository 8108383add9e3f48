"""Review submission, editing and deletion (server-rendered)."""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from accounts.decorators import login_required
from accounts.guards import can_modify, is_owner
from courses.exceptions import Conflict, NotFound
from courses.models import Course
from . import services
from .forms import ReviewCreateForm, ReviewForm


def _form_fields(form) -> dict:
    return {name: form.cleaned_data[name] for name in services.EDITABLE_FIELDS if name in form.cleaned_data}


def _load_review(request: HttpRequest, pk: int):
    try:
        return services.get_review(pk)
    except NotFound as exc:
        messages.error(request, exc.message)
        return None


@login_required
def review_create(request: HttpRequest) -> HttpResponse:
    """Submit a review for a course (one per user and course)."""
    if request.method == "POST":
        form = ReviewCreateForm(request.POST)
        if form.is_valid():
            course = form.cleaned_data["course_code"]
            try:
                services.create_review(course=course, user=request.user, **_form_fields(form))
            except Conflict as exc:
                messages.error(request, exc.message)
                return redirect("courses:detail", code=course.code)
            messages.success(request, "Review submitted successfully")
            return redirect("courses:detail", code=course.code)
        messages.error(request, "Please correct the errors below.")
    else:
        code = (request.GET.get("course") or "").strip().upper()
        form = ReviewCreateForm(initial={"course_code": code})
    course = Course.objects.filter(code=(form["course_code"].value() or "").strip().upper()).first()
    return render(request, "reviews/form.html", {"form": form, "course": course, "editing": False})


@login_required
def review_edit(request: HttpRequest, pk: int) -> HttpResponse:
    """Author-only edit; recomputes the course statistics on save."""
    review = _load_review(request, pk)
    if review is None:
        return redirect("courses:list")
    if not is_owner(request.user, review):
        messages.error(request, "You can only edit your own reviews")
        return redirect("courses:detail", code=review.course_id)
    if request.method == "POST":
        form = ReviewForm(request.POST, instance=review)
        if form.is_valid():
            services.update_review(review, **_form_fields(form))
            messages.success(request, "Review updated successfully")
            return redirect("courses:detail", code=review.course_id)
        messages.error(request, "Please correct the errors below.")
    else:
        form = ReviewForm(instance=review)
    return render(
        request,
        "reviews/form.html",
        {"form": form, "course": review.course, "review": review, "editing": True},
    )


@login_required
@require_POST
def review_delete(request: HttpRequest, pk: int) -> HttpResponse:
    """Author or admin removes a review."""
    review = _load_review(request, pk)
    if review is None:
        return redirect("courses:list")
    code = review.course_id
    if not can_modify(request.user, review):
        messages.error(request, "You can only delete your own reviews")
        return redirect("courses:detail", code=code)
    services.delete_review(review)
    messages.success(request, "Review deleted successfully")
    return redirect("courses:detail", code=code)


@login_required
@require_POST
def review_helpful(request: HttpRequest, pk: int) -> HttpResponse:
    try:
        count = services.mark_helpful(pk)
    except NotFound as exc:
        return JsonResponse({"success": False, "error": exc.message}, status=404)
    return JsonResponse({"success": True, "helpfulCount": count})
