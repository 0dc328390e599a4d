from django.contrib import admin

from .models import Trade


@admin.register(Trade)
class TradeAdmin(admin.ModelAdmin):
    list_display = ('id', 'product_name', 'currency', 'amount', 'total_amount', 'status', 'created_at')
    list_filter = ('status', 'currency')
    search_fields = ('product_name',)
