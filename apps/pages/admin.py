from __future__ import annotations

from django.contrib import admin

from .models import Content, SocialButton


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    list_display = ("id", "hero_title", "updated_at")
    readonly_fields = ("created_at", "updated_at")

    fieldsets = (
        (None, {
            "fields": ("hero_title", "hero_subtitle"),
        }),
        ("Sections", {
            "fields": ("process_steps", "security_features", "faqs"),
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
        }),
    )

    def has_add_permission(self, request):
        return not Content.objects.exists()


@admin.register(SocialButton)
class SocialButtonAdmin(admin.ModelAdmin):
    list_display = ("label", "type", "url", "sort_order", "is_active")
    list_filter = ("type", "is_active")
    list_editable = ("sort_order", "is_active")
    ordering = ("sort_order",)
