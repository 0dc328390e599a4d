from django.contrib import admin

from .models import ExchangeRate, SystemConfig


@admin.register(ExchangeRate)
class ExchangeRateAdmin(admin.ModelAdmin):
    list_display = ('symbol', 'currency', 'rate', 'change_percent', 'is_primary', 'updated_at')
    list_filter = ('is_primary',)
    search_fields = ('symbol', 'currency')
    ordering = ('-is_primary', 'symbol')


@admin.register(SystemConfig)
class SystemConfigAdmin(admin.ModelAdmin):
    list_display = ('key', 'value', 'updated_at')
