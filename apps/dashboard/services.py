from __future__ import annotations

from decimal import Decimal

from django.db.models import Count, Sum
from django.utils import timezone

from apps.currencies.models import ExchangeRate
from apps.products.models import Product
from apps.trades.models import Trade

RECENT_TRADES_LIMIT = 10


def _start_of_today():
    return timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)


def collect_stats() -> dict:
    """Aggregate figures for the back-office dashboard."""
    today = Trade.objects.filter(created_at__gte=_start_of_today()).aggregate(
        count=Count('id'), amount=Sum('total_amount'),
    )
    overall = Trade.objects.aggregate(count=Count('id'), amount=Sum('total_amount'))
    recent = list(
        Trade.objects.filter(status=Trade.Status.COMPLETED).order_by('-created_at')[:RECENT_TRADES_LIMIT]
    )
    return {
        'todayTrades': today['count'],
        'todayAmount': today['amount'] or Decimal('0'),
        'totalTrades': overall['count'],
        'totalAmount': overall['amount'] or Decimal('0'),
        'activeProducts': Product.objects.filter(status=Product.Status.ACTIVE).count(),
        'totalProducts': Product.objects.count(),
        'exchangeRateCount': ExchangeRate.objects.count(),
        'recentTrades': recent,
    }
