from __future__ import annotations

import django_filters

from courses.constants import MATERIAL_TYPES, SEMESTERS, choices
from materials.models import Material


class MaterialFilter(django_filters.FilterSet):
    courseCode = django_filters.CharFilter(method="filter_course_code")
    type = django_filters.ChoiceFilter(field_name="type", choices=choices(MATERIAL_TYPES))
    semester = django_filters.ChoiceFilter(field_name="semester", choices=choices(SEMESTERS))
    year = django_filters.NumberFilter(field_name="year")

    class Meta:
        model = Material
        fields = ["courseCode", "type", "semester", "year"]

    def filter_course_code(self, queryset, name, value):
        return queryset.filter(course_id=value.strip().upper())
