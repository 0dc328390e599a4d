from django.contrib import admin

from .models import ConversionConfig


@admin.register(ConversionConfig)
class ConversionConfigAdmin(admin.ModelAdmin):
    list_display = ('id', 'r_rate', 'service_fee_percent', 'ngn_rate', 'ghc_rate', 'updated_at')
