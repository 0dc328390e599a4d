"""Exchange-rate store maintenance: base currency and periodic sync."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from .models import ExchangeRate, SystemConfig
from .rates_client import fetch_rates

logger = logging.getLogger(__name__)

PRIMARY_CURRENCIES = ('USD', 'CNY', 'NGN', 'BTC', 'GHC')

RATE_QUANT = Decimal('0.00000001')
PERCENT_QUANT = Decimal('0.01')


def _column_max(field_name: str) -> Decimal:
    f = ExchangeRate._meta.get_field(field_name)
    return Decimal(10) ** (f.max_digits - f.decimal_places) - Decimal(10) ** -f.decimal_places


RATE_MAX = _column_max('rate')
# a rate moving off a near-zero value yields percents far beyond the column
PERCENT_MAX = _column_max('change_percent')


@dataclass
class SyncResult:
    updated: int = 0
    skipped: int = 0
    skipped_symbols: List[str] = field(default_factory=list)


def get_base_currency() -> str:
    default = settings.DEFAULT_BASE_CURRENCY
    try:
        row = SystemConfig.objects.filter(key=SystemConfig.BASE_CURRENCY_KEY).first()
    except DatabaseError as exc:
        logger.warning('Could not read base currency, using %s: %s', default, exc)
        return default
    return (row.value if row and row.value else default).upper()


def ensure_base_currency() -> str:
    """Return the stored base currency, creating the row with the default if absent."""
    row, _ = SystemConfig.objects.get_or_create(
        key=SystemConfig.BASE_CURRENCY_KEY,
        defaults={'value': settings.DEFAULT_BASE_CURRENCY},
    )
    return row.value.upper()


def set_base_currency(code: str) -> bool:
    """Persist a new base currency. Returns True when the value changed.

    A change triggers a full recomputation of every stored rate; a failing
    sync is logged and the new base currency is kept.
    """
    new = (code or '').strip().upper()
    old = get_base_currency()
    if new == old:
        return False

    SystemConfig.objects.update_or_create(key=SystemConfig.BASE_CURRENCY_KEY, defaults={'value': new})
    logger.info('Base currency changed %s -> %s, recomputing rates', old, new)
    try:
        update_all_rates()
    except Exception:
        logger.exception('Rate recomputation after base currency change failed')
    return True


def apply_new_rate(row: ExchangeRate, new_rate: Decimal) -> None:
    old = Decimal(row.rate or 0)
    new = new_rate.quantize(RATE_QUANT)
    change = new - old
    change_percent = (change / old * 100) if old != 0 else Decimal('0')
    change_percent = max(-PERCENT_MAX, min(PERCENT_MAX, change_percent))
    row.rate = new
    row.change = change
    row.change_percent = change_percent.quantize(PERCENT_QUANT)
    row.updated_at = timezone.now()


def update_all_rates() -> SyncResult:
    """Refresh every stored rate from the live feeds.

    Rows the feeds could not price keep their previous values. Each updated
    row is saved on its own.
    """
    result = SyncResult()
    rows = list(ExchangeRate.objects.all())
    if not rows:
        logger.info('No exchange rates stored, nothing to sync')
        return result

    base = get_base_currency()
    logger.info('Syncing %d exchange rates against %s', len(rows), base)
    fresh = fetch_rates([r.symbol for r in rows], base)

    for row in rows:
        new_rate = fresh.get(row.symbol)
        if (new_rate is None or not new_rate.is_finite()
                or new_rate > RATE_MAX or new_rate.quantize(RATE_QUANT) <= 0):
            result.skipped += 1
            result.skipped_symbols.append(row.symbol)
            logger.info('Keeping %s at %s, no fresh rate', row.symbol, row.rate)
            continue
        apply_new_rate(row, new_rate)
        row.save(update_fields=['rate', 'change', 'change_percent', 'updated_at'])
        result.updated += 1

    logger.info('Exchange rate sync done: %d updated, %d skipped', result.updated, result.skipped)
    return result


def fetch_rate_for_new_currency(symbol: str) -> Optional[Decimal]:
    """Live rate for a currency an admin is about to create, or None."""
    symbol = (symbol or '').upper()
    value = fetch_rates([symbol], get_base_currency()).get(symbol)
    if value is None or value <= 0:
        return None
    return value.quantize(RATE_QUANT)


def mark_primary_currencies() -> int:
    ExchangeRate.objects.update(is_primary=False)
    return ExchangeRate.objects.filter(symbol__in=PRIMARY_CURRENCIES).update(is_primary=True)
