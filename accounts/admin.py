from django.contrib import admin

from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "display_name", "is_admin", "created_at")
    list_filter = ("is_admin",)
    search_fields = ("user__username", "user__email", "display_name")
    readonly_fields = ("google_sub",)
