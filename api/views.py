"""JSON API viewsets and statistics endpoints."""
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from courses import services as course_services
from courses.queries import find_courses, top_rated_courses
from materials import services as material_services
from reviews import services as review_services
from reviews.queries import find_reviews, recent_reviews, reviews_by_instructor
from reviews.stats import difficulty_distribution
from .filters import MaterialFilter
from .permissions import AdminOrReadOnly, AuthenticatedAction, ReviewPermission
from .serializers import CourseSerializer, MaterialSerializer, ReviewSerializer

DEFAULT_TOP_LIMIT = 10
DEFAULT_RECENT_LIMIT = 20
MAX_LIMIT = 100


def envelope(data, status_code: int = status.HTTP_200_OK, **extra) -> Response:
    return Response({"success": True, "data": data, **extra}, status=status_code)


def _limit(request, default: int) -> int:
    try:
        value = int(request.query_params.get("limit", default))
    except (TypeError, ValueError):
        return default
    if value <= 0:
        return default
    return min(value, MAX_LIMIT)


class EnvelopeModelMixin:
    """Wrap single-object responses in `{success, data}`."""

    deleted_message = "Deleted successfully"

    def retrieve(self, request, *args, **kwargs):
        return envelope(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return envelope(serializer.data, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return envelope(serializer.data)

    def destroy(self, request, *args, **kwargs):
        self.perform_destroy(self.get_object())
        return Response({"success": True, "message": self.deleted_message})


class CourseViewSet(EnvelopeModelMixin, viewsets.ModelViewSet):
    serializer_class = CourseSerializer
    permission_classes = [AdminOrReadOnly]
    lookup_field = "code"
    lookup_value_regex = "[^/]+"
    filter_backends = []
    deleted_message = "Course deleted successfully"

    def get_queryset(self):
        return find_courses(self.request.query_params)

    def get_object(self):
        course = course_services.get_course(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, course)
        return course

    def perform_destroy(self, instance):
        course_services.delete_course(instance)


class ReviewViewSet(EnvelopeModelMixin, viewsets.ModelViewSet):
    serializer_class = ReviewSerializer
    permission_classes = [ReviewPermission]
    filter_backends = []
    deleted_message = "Review deleted successfully"

    def get_queryset(self):
        return find_reviews(self.request.query_params)

    def get_object(self):
        review = review_services.get_review(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, review)
        return review

    def perform_destroy(self, instance):
        review_services.delete_review(instance)

    @extend_schema(request=None, responses={200: dict})
    @action(detail=True, methods=["post"], permission_classes=[AuthenticatedAction])
    def helpful(self, request, pk=None):
        count = review_services.mark_helpful(pk)
        return envelope({"helpfulCount": count}, helpfulCount=count)


class MaterialViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Material metadata, filterable by courseCode, type, semester and year."""

    serializer_class = MaterialSerializer
    permission_classes = [AllowAny]
    filterset_class = MaterialFilter

    def get_queryset(self):
        return material_services.listing().order_by("-created_at")

    def get_object(self):
        return material_services.get_material(self.kwargs[self.lookup_field])

    def retrieve(self, request, *args, **kwargs):
        return envelope(self.get_serializer(self.get_object()).data)


@extend_schema(responses=CourseSerializer(many=True))
@api_view(["GET"])
@permission_classes([AllowAny])
def top_courses(request):
    courses = list(top_rated_courses(_limit(request, DEFAULT_TOP_LIMIT)))
    return envelope(CourseSerializer(courses, many=True).data, count=len(courses))


@extend_schema(responses=ReviewSerializer(many=True))
@api_view(["GET"])
@permission_classes([AllowAny])
def latest_reviews(request):
    reviews = list(recent_reviews(_limit(request, DEFAULT_RECENT_LIMIT)))
    return envelope(ReviewSerializer(reviews, many=True).data, count=len(reviews))


@extend_schema(responses={200: dict})
@api_view(["GET"])
@permission_classes([AllowAny])
def difficulty(request):
    return envelope(difficulty_distribution())


@extend_schema(responses=ReviewSerializer(many=True))
@api_view(["GET"])
@permission_classes([AllowAny])
def instructor_reviews(request, name):
    reviews = list(reviews_by_instructor(name)[: _limit(request, DEFAULT_RECENT_LIMIT)])
    return envelope(ReviewSerializer(reviews, many=True).data, count=len(reviews))
