from django.urls import path

from .views import review_create, review_delete, review_edit, review_helpful

app_name = "reviews"

urlpatterns = [
    path("create/", review_create, name="create"),
    path("<int:pk>/edit/", review_edit, name="edit"),
    path("<int:pk>/delete/", review_delete, name="delete"),
    path("<int:pk>/helpful/", review_helpful, name="helpful"),
]
