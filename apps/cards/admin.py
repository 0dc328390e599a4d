from django.contrib import admin

from .models import SupportedCard


@admin.register(SupportedCard)
class SupportedCardAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'logo_url', 'sort_order', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('name',)
