"""Serializers for the JSON API.

Field names are camelCase on the wire and mapped onto model fields with
`source=`. Writes go through the service modules so that course
statistics and conflict checks behave the same as on the web pages.
"""
from __future__ import annotations

from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import serializers

from accounts.guards import is_authenticated
from courses import services as course_services
from courses.constants import GRADES, MATERIAL_TYPES, MAX_RATING, MAX_YEAR, MIN_RATING, MIN_YEAR, PROGRAMS, SEMESTERS
from courses.models import COURSE_CODE_MAX, Course, validate_course_code
from materials.models import Material
from reviews import services as review_services
from reviews.models import LIST_ITEM_MAX, REVIEW_TEXT_MAX, REVIEW_TEXT_MIN, TIPS_MAX, Review

User = get_user_model()


def open_api() -> bool:
    return bool(getattr(settings, "COURSEHUB_OPEN_API", False))


class CourseSerializer(serializers.ModelSerializer):
    courseCode = serializers.CharField(source="code", max_length=COURSE_CODE_MAX, validators=[validate_course_code])
    name = serializers.CharField(min_length=3, max_length=200)
    program = serializers.ChoiceField(choices=PROGRAMS)
    credits = serializers.IntegerField(min_value=1, max_value=10)
    description = serializers.CharField(min_length=50, max_length=2000)
    prerequisites = serializers.ListField(child=serializers.CharField(max_length=COURSE_CODE_MAX), required=False)
    instructors = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    averageRating = serializers.DecimalField(source="average_rating", max_digits=3, decimal_places=2, read_only=True)
    reviewCount = serializers.IntegerField(source="review_count", read_only=True)
    averageDifficulty = serializers.DecimalField(source="average_difficulty", max_digits=3, decimal_places=2, read_only=True)
    averageWorkload = serializers.DecimalField(source="average_workload", max_digits=3, decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Course
        fields = (
            "courseCode",
            "name",
            "program",
            "credits",
            "description",
            "prerequisites",
            "instructors",
            "averageRating",
            "reviewCount",
            "averageDifficulty",
            "averageWorkload",
            "createdAt",
            "updatedAt",
        )

    def get_fields(self):
        fields = super().get_fields()
        # The code identifies the course and cannot change after creation
        if self.instance is not None:
            fields["courseCode"].read_only = True
        return fields

    def validate_prerequisites(self, value):
        return [code.strip().upper() for code in value if code.strip()]

    def validate_instructors(self, value):
        return [name.strip() for name in value if name.strip()]

    def create(self, validated_data):
        code = validated_data.pop("code")
        return course_services.create_course(code=code, **validated_data)

    def update(self, instance, validated_data):
        validated_data.pop("code", None)
        return course_services.update_course(instance, **validated_data)


class CourseCodeField(serializers.SlugRelatedField):
    """Course reference by code; lookups are case-insensitive."""

    default_error_messages = {
        "does_not_exist": "Course not found",
        "invalid": "Invalid course code",
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("slug_field", "code")
        kwargs.setdefault("queryset", Course.objects.all())
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip().upper()
        return super().to_internal_value(data)


class ReviewSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(read_only=True)
    courseCode = CourseCodeField(source="course")
    userId = serializers.PrimaryKeyRelatedField(source="user", queryset=User.objects.all(), required=False)
    userName = serializers.CharField(source="user_name", read_only=True)
    userPhoto = serializers.CharField(source="user_photo", read_only=True)
    semester = serializers.ChoiceField(choices=SEMESTERS)
    year = serializers.IntegerField(min_value=MIN_YEAR, max_value=MAX_YEAR)
    instructor = serializers.CharField(min_length=2, max_length=100)
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    difficulty = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    workload = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    grade = serializers.ChoiceField(choices=GRADES, required=False, allow_blank=True)
    reviewText = serializers.CharField(source="review_text", min_length=REVIEW_TEXT_MIN, max_length=REVIEW_TEXT_MAX)
    pros = serializers.ListField(child=serializers.CharField(max_length=LIST_ITEM_MAX, allow_blank=True), required=False)
    cons = serializers.ListField(child=serializers.CharField(max_length=LIST_ITEM_MAX, allow_blank=True), required=False)
    tips = serializers.CharField(max_length=TIPS_MAX, required=False, allow_blank=True)
    helpfulCount = serializers.IntegerField(source="helpful_count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Review
        # Duplicate reviews are reported by the service layer as a conflict
        validators = []
        fields = (
            "id",
            "courseCode",
            "userId",
            "userName",
            "userPhoto",
            "semester",
            "year",
            "instructor",
            "rating",
            "difficulty",
            "workload",
            "grade",
            "reviewText",
            "pros",
            "cons",
            "tips",
            "helpfulCount",
            "createdAt",
            "updatedAt",
        )

    def get_fields(self):
        fields = super().get_fields()
        if self.instance is not None:
            fields["courseCode"].read_only = True
            fields["userId"].read_only = True
        elif not open_api():
            # The author is always the signed-in user
            fields["userId"].read_only = True
        return fields

    def validate_pros(self, value):
        return [item.strip() for item in value if item.strip()]

    def validate_cons(self, value):
        return [item.strip() for item in value if item.strip()]

    def validate(self, attrs):
        if self.instance is None:
            if open_api():
                if "user" not in attrs:
                    raise serializers.ValidationError({"userId": "userId is required in request body"})
            else:
                user = self.context["request"].user
                if not is_authenticated(user):
                    raise serializers.ValidationError("Authentication required")
                attrs["user"] = user
        return attrs

    def create(self, validated_data):
        course = validated_data.pop("course")
        user = validated_data.pop("user")
        return review_services.create_review(course=course, user=user, **validated_data)

    def update(self, instance, validated_data):
        validated_data.pop("course", None)
        validated_data.pop("user", None)
        return review_services.update_review(instance, **validated_data)


class MaterialSerializer(serializers.ModelSerializer):
    """Material metadata; the file bytes are only served by the download page."""

    courseCode = serializers.CharField(source="course_id", read_only=True)
    uploadedBy = serializers.IntegerField(source="uploaded_by_id", read_only=True)
    uploaderName = serializers.CharField(source="uploader_name", read_only=True)
    type = serializers.ChoiceField(choices=MATERIAL_TYPES, read_only=True)
    fileType = serializers.CharField(source="file_type", read_only=True)
    fileName = serializers.CharField(source="file_name", read_only=True)
    fileSize = serializers.IntegerField(source="file_size", read_only=True)
    downloadCount = serializers.IntegerField(source="download_count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Material
        fields = (
            "id",
            "courseCode",
            "uploadedBy",
            "uploaderName",
            "title",
            "description",
            "type",
            "semester",
            "year",
            "fileType",
            "fileName",
            "fileSize",
            "downloadCount",
            "createdAt",
        )
        read_only_fields = fields
