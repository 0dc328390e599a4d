"""
Gift-card payout arithmetic shared by the public calculator endpoint and the
admin preview.

    payout = floor(amount * category_rate * (1 - service_fee) * regional_multiplier)

All math is done in ``Decimal``; the result is truncated (floored) to a whole
unit of the payout currency.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from typing import Dict, Optional

SUPPORTED_PAYOUT_CURRENCIES = ('NGN', 'GHC')


class ConversionError(ValueError):
    """Raised for inputs the calculator cannot price."""
    pass


def _dec(value, name: str) -> Decimal:
    if isinstance(value, bool):
        raise ConversionError(f'{name} must be a number')
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ConversionError(f'{name} must be a number')
    if not d.is_finite():
        raise ConversionError(f'{name} must be a number')
    return d


def floor_int(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def calculate_payout(amount, category_rate, service_fee_fraction, regional_multiplier) -> int:
    amount = _dec(amount, 'amount')
    rate = _dec(category_rate, 'rate')
    fee = _dec(service_fee_fraction, 'serviceFeePercent')
    multiplier = _dec(regional_multiplier, 'multiplier')
    return floor_int(amount * rate * (Decimal('1') - fee) * multiplier)


def regional_multiplier(config, currency: str) -> Decimal:
    code = (currency or '').upper()
    if code == 'NGN':
        return Decimal(config.ngn_rate)
    if code == 'GHC':
        return Decimal(config.ghc_rate)
    raise ConversionError(f'Unsupported payout currency: {currency}')


@dataclass
class CategoryRate:
    rate: Decimal
    currency: Optional[str] = None


def lookup_category_rate(config, card_type: str, category: str) -> CategoryRate:
    entry = ((config.category_rates or {}).get(card_type) or {}).get(category)
    if not isinstance(entry, dict) or entry.get('rate') in (None, ''):
        raise ConversionError(f'No rate configured for {card_type} / {category}')
    rate = _dec(entry['rate'], 'rate')
    if rate <= 0:
        raise ConversionError(f'No rate configured for {card_type} / {category}')
    return CategoryRate(rate=rate, currency=entry.get('currency'))


def project_payouts(amount, category_rate, service_fee_fraction, config) -> Dict[str, int]:
    return {
        code: calculate_payout(amount, category_rate, service_fee_fraction, regional_multiplier(config, code))
        for code in SUPPORTED_PAYOUT_CURRENCIES
    }


def preview(config, amount=100) -> Dict[str, object]:
    """What ``amount`` USD would pay out at the reference ``r_rate``."""
    amount = _dec(amount, 'amount')
    fee = Decimal(config.service_fee_percent)
    step1 = amount * Decimal(config.r_rate) * (Decimal('1') - fee)
    return {
        'amount': amount,
        'step1': step1,
        'ngn': floor_int(step1 * Decimal(config.ngn_rate)),
        'ghc': floor_int(step1 * Decimal(config.ghc_rate)),
    }
