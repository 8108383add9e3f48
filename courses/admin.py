from django.contrib import admin

from .models import Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "program", "credits", "average_rating", "review_count")
    list_filter = ("program",)
    search_fields = ("code", "name")
    readonly_fields = ("average_rating", "review_count", "average_difficulty", "average_workload")
