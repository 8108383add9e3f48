from django.urls import path

from .views import delete, download, upload

app_name = "materials"

urlpatterns = [
    path("upload/", upload, name="upload"),
    path("<int:pk>/download/", download, name="download"),
    path("<int:pk>/delete/", delete, name="delete"),
]
