from __future__ import annotations

from decimal import Decimal

from django.db import models

DEFAULT_R_RATE = Decimal('7.13')
DEFAULT_SERVICE_FEE = Decimal('0.03')
DEFAULT_NGN_RATE = Decimal('200')
DEFAULT_GHC_RATE = Decimal('1.0')


class ConversionConfig(models.Model):
    """Payout calculator settings. Only the first row (lowest id) is used."""

    class Meta:
        db_table = 'conversion_config'
        ordering = ['id']

    # USD -> CNY reference rate used by the admin preview
    r_rate = models.DecimalField(max_digits=10, decimal_places=4, default=DEFAULT_R_RATE)
    # fraction kept by the platform, 0.03 == 3%
    service_fee_percent = models.DecimalField(max_digits=5, decimal_places=4, default=DEFAULT_SERVICE_FEE)
    # 1 CNY = X NGN / X GHC
    ngn_rate = models.DecimalField(max_digits=10, decimal_places=4, default=DEFAULT_NGN_RATE)
    ghc_rate = models.DecimalField(max_digits=10, decimal_places=4, default=DEFAULT_GHC_RATE)
    # {"Xbox": ["Amazon US", "Amazon UK"]}
    card_categories = models.JSONField(default=dict, blank=True)
    # {"Xbox": {"Amazon US": {"rate": 7.2, "currency": "USD"}}}
    category_rates = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    @classmethod
    def get_solo(cls) -> 'ConversionConfig':
        config = cls.objects.order_by('id').first()
        if config is None:
            config = cls.objects.create()
        return config

    def __str__(self) -> str:
        return f"ConversionConfig#{self.pk} r={self.r_rate} fee={self.service_fee_percent}"
