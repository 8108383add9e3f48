"""JSON API routes, schema and interactive docs (mounted under /api/)."""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.routers import DefaultRouter

from .views import CourseViewSet, MaterialViewSet, ReviewViewSet, difficulty, instructor_reviews, latest_reviews, top_courses

router = DefaultRouter()
router.register(r"courses", CourseViewSet, basename="courses")
router.register(r"reviews", ReviewViewSet, basename="reviews")
router.register(r"materials", MaterialViewSet, basename="materials")

urlpatterns = [
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("stats/top-courses/", top_courses, name="stats-top-courses"),
    path("stats/recent-reviews/", latest_reviews, name="stats-recent-reviews"),
    path("stats/difficulty/", difficulty, name="stats-difficulty"),
    path("instructors/<str:name>/reviews/", instructor_reviews, name="instructor-reviews"),
    path("", include(router.urls)),
]
