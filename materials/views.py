"""Upload, download and removal of course materials."""
from __future__ import annotations

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils.http import content_disposition_header
from django.views.decorators.http import require_POST

from accounts.decorators import login_required
from accounts.guards import can_modify
from courses.exceptions import NotFound
from courses.models import Course
from . import services
from .forms import MaterialUploadForm


@login_required
def upload(request: HttpRequest) -> HttpResponse:
    if request.method == "POST":
        form = MaterialUploadForm(request.POST, request.FILES)
        if form.is_valid():
            course = form.cleaned_data["course_code"]
            fields = {name: form.cleaned_data[name] for name in services.METADATA_FIELDS}
            services.upload_material(course=course, user=request.user, file=form.cleaned_data["file"], **fields)
            messages.success(request, "Material uploaded successfully")
            return redirect("courses:detail", code=course.code)
        messages.error(request, "; ".join(str(e) for e in form.errors.get("file", [])) or "Please correct the errors below.")
    else:
        code = (request.GET.get("course") or "").strip().upper()
        form = MaterialUploadForm(initial={"course_code": code})
    course = Course.objects.filter(code=(form["course_code"].value() or "").strip().upper()).first()
    return render(request, "materials/upload.html", {"form": form, "course": course})


@login_required
def download(request: HttpRequest, pk: int) -> HttpResponse:
    try:
        material = services.open_for_download(pk)
    except NotFound as exc:
        messages.error(request, exc.message)
        return redirect("courses:list")
    data = bytes(material.file_data)
    response = HttpResponse(data, content_type=material.file_type)
    response["Content-Length"] = str(len(data))
    response["Content-Disposition"] = content_disposition_header(True, material.file_name)
    return response


@login_required
@require_POST
def delete(request: HttpRequest, pk: int) -> HttpResponse:
    try:
        material = services.get_material(pk)
    except NotFound as exc:
        messages.error(request, exc.message)
        return redirect("courses:list")
    code = material.course_id
    if not can_modify(request.user, material, owner_attr="uploaded_by_id"):
        messages.error(request, "You can only delete your own materials")
        return redirect("courses:detail", code=code)
    services.delete_material(material)
    messages.success(request, "Material deleted successfully")
    return redirect("courses:detail", code=code)
