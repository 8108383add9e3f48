"""Forms for submitting and editing reviews."""
from __future__ import annotations

from django import forms

from courses.constants import MAX_RATING, MIN_RATING
from courses.models import Course
from .models import LIST_ITEM_MAX, Review

SCALE = [(i, i) for i in range(MIN_RATING, MAX_RATING + 1)]


class LinesField(forms.CharField):
    """Textarea input stored as a list: one item per non-blank line."""

    widget = forms.Textarea(attrs={"rows": 3, "placeholder": "One item per line"})

    def __init__(self, *, item_max_length: int = LIST_ITEM_MAX, **kwargs):
        self.item_max_length = item_max_length
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def prepare_value(self, value):
        if isinstance(value, (list, tuple)):
            return "\n".join(value)
        return value

    def to_python(self, value):
        text = super().to_python(value) or ""
        return [line.strip() for line in text.splitlines() if line.strip()]

    def validate(self, value):
        super().validate(value)
        for item in value:
            if len(item) > self.item_max_length:
                raise forms.ValidationError(f"Each item must be at most {self.item_max_length} characters.")


class ReviewForm(forms.ModelForm):
    rating = forms.TypedChoiceField(choices=SCALE, coerce=int, label="Overall rating")
    difficulty = forms.TypedChoiceField(choices=SCALE, coerce=int, label="Difficulty")
    workload = forms.TypedChoiceField(choices=SCALE, coerce=int, label="Workload")
    instructor = forms.CharField(min_length=2, max_length=100)
    pros = LinesField(label="Pros")
    cons = LinesField(label="Cons")

    class Meta:
        model = Review
        fields = (
            "semester",
            "year",
            "instructor",
            "rating",
            "difficulty",
            "workload",
            "grade",
            "review_text",
            "pros",
            "cons",
            "tips",
        )
        widgets = {
            "review_text": forms.Textarea(attrs={"rows": 6, "maxlength": 2000}),
            "tips": forms.Textarea(attrs={"rows": 3, "maxlength": 500}),
        }


class ReviewCreateForm(ReviewForm):
    """Adds the course picker used when a review is first submitted."""

    course_code = forms.CharField(label="Course code", max_length=15)

    field_order = ["course_code"]

    def clean_course_code(self) -> Course:
        code = (self.cleaned_data.get("course_code") or "").strip().upper()
        course = Course.objects.filter(code=code).first()
        if course is None:
            raise forms.ValidationError("Course not found")
        return course
