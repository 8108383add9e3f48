"""Forms for creating and editing courses (admin only)."""
from __future__ import annotations

from django import forms

from .models import Course


class CommaListField(forms.CharField):
    """Comma-separated text stored as a list of trimmed, non-empty strings."""

    def prepare_value(self, value):
        if isinstance(value, (list, tuple)):
            return ", ".join(value)
        return value

    def to_python(self, value):
        text = super().to_python(value) or ""
        return [part.strip() for part in text.split(",") if part.strip()]


class CourseForm(forms.ModelForm):
    description = forms.CharField(
        min_length=50,
        max_length=2000,
        widget=forms.Textarea(attrs={"rows": 6, "maxlength": 2000}),
    )
    prerequisites = CommaListField(required=False, help_text="Comma-separated course codes")
    instructors = CommaListField(required=False, help_text="Comma-separated names")

    class Meta:
        model = Course
        fields = ("code", "name", "program", "credits", "description", "prerequisites", "instructors")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # The code is the course's identity once created
        if self.instance.pk:
            self.fields["code"].disabled = True
            self.fields["code"].required = False

    def clean_prerequisites(self):
        return [code.upper() for code in self.cleaned_data.get("prerequisites", [])]
