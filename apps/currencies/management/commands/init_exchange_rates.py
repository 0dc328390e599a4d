from decimal import Decimal

from django.core.management.base import BaseCommand

from apps.currencies.models import ExchangeRate
from apps.currencies.services import ensure_base_currency, mark_primary_currencies

DEFAULT_RATES = [
    ('US Dollar', 'USD', '7.25', '0.01', '0.14'),
    ('Chinese Yuan', 'CNY', '1', '0', '0'),
    ('Nigerian Naira', 'NGN', '0.0085', '-0.0001', '-1.16'),
    ('Bitcoin', 'BTC', '285000', '1250', '0.44'),
    ('Ghanaian Cedi', 'GHC', '0.62', '0.005', '0.81'),
]


class Command(BaseCommand):
    help = "Seed the default exchange rates (USD, CNY, NGN, BTC, GHC) when the table is empty"

    def handle(self, *args, **opts):
        base = ensure_base_currency()
        if ExchangeRate.objects.exists():
            self.stdout.write("Exchange rates already present, skipping seed")
        else:
            for currency, symbol, rate, change, pct in DEFAULT_RATES:
                ExchangeRate.objects.create(
                    currency=currency,
                    symbol=symbol,
                    rate=Decimal(rate),
                    change=Decimal(change),
                    change_percent=Decimal(pct),
                    is_primary=True,
                )
                self.stdout.write(f"Created {symbol} ({currency})")
        marked = mark_primary_currencies()
        self.stdout.write(self.style.SUCCESS(f"BASE_CURRENCY={base} PRIMARY={marked}"))
