from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("course", "user_name", "semester", "year", "rating", "helpful_count", "created_at")
    list_filter = ("semester", "year", "rating")
    search_fields = ("course__code", "user_name", "instructor")
    readonly_fields = ("helpful_count",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
