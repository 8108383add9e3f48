from django.urls import path

from .views import google_callback, google_start, login_page, logout_view

app_name = "accounts"

urlpatterns = [
    path("login/", login_page, name="login"),
    path("google/", google_start, name="google"),
    path("google/callback/", google_callback, name="google-callback"),
    path("logout/", logout_view, name="logout"),
]
