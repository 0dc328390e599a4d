from __future__ import annotations

from django.db import models


class ExchangeRate(models.Model):
    class Meta:
        db_table = 'exchange_rates'
        ordering = ['-updated_at']

    currency = models.CharField(max_length=100)
    symbol = models.CharField(max_length=16, unique=True)
    rate = models.DecimalField(max_digits=20, decimal_places=8)
    change = models.DecimalField(max_digits=20, decimal_places=8, default=0)
    change_percent = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    is_primary = models.BooleanField(default=False)
    api_source = models.CharField(max_length=64, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.symbol} = {self.rate}"


class SystemConfig(models.Model):
    """Key/value settings row (currently only ``base_currency``)."""

    class Meta:
        db_table = 'system_config'

    BASE_CURRENCY_KEY = 'base_currency'

    key = models.CharField(max_length=64, primary_key=True)
    value = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
