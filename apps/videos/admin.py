from django.contrib import admin

from .models import Video


@admin.register(Video)
class VideoAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'type', 'video_url', 'sort_order', 'is_active')
    list_filter = ('type', 'is_active')
