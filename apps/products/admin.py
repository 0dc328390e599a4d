from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'category', 'exchange_rate', 'min_amount', 'max_amount', 'status', 'created_at')
    list_filter = ('status', 'category')
    search_fields = ('name', 'category')
