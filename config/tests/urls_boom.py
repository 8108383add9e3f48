from django.urls import path

from config.urls import urlpatterns as site_urlpatterns


def boom(request):
    raise RuntimeError("database on fire")


urlpatterns = [
    path("boom/", boom),
    path("api/boom/", boom),
] + site_urlpatterns
