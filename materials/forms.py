"""Forms for uploading course materials."""
from __future__ import annotations

from django import forms

from courses.models import Course
from .models import Material, validate_upload


class MaterialUploadForm(forms.ModelForm):
    """Upload form (10 MB cap; PDF, DOC, DOCX, PPT, PPTX)."""

    course_code = forms.CharField(label="Course code", max_length=15)
    file = forms.FileField()

    field_order = ["course_code", "title", "description", "type", "semester", "year", "file"]

    class Meta:
        model = Material
        fields = ("title", "description", "type", "semester", "year")
        widgets = {"description": forms.Textarea(attrs={"rows": 3, "maxlength": 500})}

    def clean_course_code(self) -> Course:
        code = (self.cleaned_data.get("course_code") or "").strip().upper()
        course = Course.objects.filter(code=code).first()
        if course is None:
            raise forms.ValidationError("Course not found")
        return course

    def clean_file(self):
        f = self.cleaned_data.get("file")
        if f:
            validate_upload(f)
        return f
