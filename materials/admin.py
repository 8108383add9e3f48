from django.contrib import admin

from .models import Material


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ("title", "course", "type", "uploader_name", "file_size", "download_count", "created_at")
    list_filter = ("type", "semester", "year")
    search_fields = ("title", "course__code", "uploader_name")
    readonly_fields = ("file_name", "file_type", "file_size", "download_count")

    def get_queryset(self, request):
        return super().get_queryset(request).defer("file_data")
