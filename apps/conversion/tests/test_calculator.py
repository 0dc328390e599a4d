from decimal import Decimal
from types import SimpleNamespace
from unittest import TestCase

from apps.conversion.calculator import (
    ConversionError,
    calculate_payout,
    lookup_category_rate,
    preview,
    project_payouts,
    regional_multiplier,
)


def make_config(**overrides):
    values = dict(
        r_rate=Decimal('7.13'),
        service_fee_percent=Decimal('0.03'),
        ngn_rate=Decimal('200'),
        ghc_rate=Decimal('1.0'),
        card_categories={'Xbox': ['Amazon US']},
        category_rates={'Xbox': {'Amazon US': {'rate': 7.2, 'currency': 'USD'}}},
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class CalculatePayoutTests(TestCase):
    def test_reference_example(self):
        self.assertEqual(calculate_payout(100, '7.13', '0.03', 200), 138322)

    def test_result_is_floored_not_rounded(self):
        # 10 * 1.1 * 0.97 * 1 = 10.67
        self.assertEqual(calculate_payout(10, '1.1', '0.03', 1), 10)

    def test_is_pure(self):
        args = (Decimal('25.50'), Decimal('6.9'), Decimal('0.05'), Decimal('1.3'))
        self.assertEqual(calculate_payout(*args), calculate_payout(*args))

    def test_rejects_non_numbers(self):
        with self.assertRaises(ConversionError):
            calculate_payout('abc', 1, 0, 1)
        with self.assertRaises(ConversionError):
            calculate_payout(True, 1, 0, 1)


class ConfigHelpersTests(TestCase):
    def test_regional_multiplier(self):
        config = make_config()
        self.assertEqual(regional_multiplier(config, 'ngn'), Decimal('200'))
        self.assertEqual(regional_multiplier(config, 'GHC'), Decimal('1.0'))
        with self.assertRaises(ConversionError):
            regional_multiplier(config, 'USD')

    def test_lookup_category_rate(self):
        found = lookup_category_rate(make_config(), 'Xbox', 'Amazon US')
        self.assertEqual(found.rate, Decimal('7.2'))
        self.assertEqual(found.currency, 'USD')
        with self.assertRaises(ConversionError):
            lookup_category_rate(make_config(), 'Xbox', 'Amazon UK')
        with self.assertRaises(ConversionError):
            lookup_category_rate(make_config(category_rates=None), 'Xbox', 'Amazon US')

    def test_project_payouts_covers_both_regions(self):
        out = project_payouts(100, Decimal('7.13'), Decimal('0.03'), make_config(ghc_rate=Decimal('0.8')))
        self.assertEqual(out, {'NGN': 138322, 'GHC': 553})

    def test_preview_uses_reference_rate(self):
        out = preview(make_config())
        self.assertEqual(out['step1'], Decimal('691.6100'))
        self.assertEqual(out['ngn'], 138322)
        self.assertEqual(out['ghc'], 691)
