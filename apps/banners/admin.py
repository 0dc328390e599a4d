from django.contrib import admin

from .models import Carousel, CompanyImage


@admin.register(Carousel)
class CarouselAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'image_url', 'sort_order', 'is_active', 'created_at')
    list_filter = ('is_active',)
    list_editable = ('sort_order', 'is_active')
    ordering = ('sort_order', '-created_at')


@admin.register(CompanyImage)
class CompanyImageAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'image_url', 'sort_order', 'is_active', 'created_at')
    list_filter = ('is_active',)
    ordering = ('sort_order', '-created_at')
