from django.urls import path

from .views import course_create, course_delete, course_detail, course_edit, course_list

app_name = "courses"

urlpatterns = [
    path("", course_list, name="list"),
    path("create/", course_create, name="create"),
    path("<str:code>/", course_detail, name="detail"),
    path("<str:code>/edit/", course_edit, name="edit"),
    path("<str:code>/delete/", course_delete, name="delete"),
]
