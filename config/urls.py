"""URL routing for CourseHub.

Server-rendered pages live at the top level; the JSON API, its schema
and docs are mounted under /api/.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("auth/", include("accounts.urls")),
    path("courses/", include("courses.urls")),
    path("reviews/", include("reviews.urls")),
    path("materials/", include("materials.urls")),
    path("api/", include("api.urls")),
    path("", include("ui.urls")),
]

handler404 = "ui.views.page_not_found"
