"""Client for the public fiat and crypto price feeds.

Fiat rates come from an exchangerate-api style endpoint
(``GET {FIAT_RATES_URL}/{base}`` -> ``{"rates": {"USD": 0.1379, ...}}``);
crypto prices from CoinGecko ``simple/price`` in USD. Every value returned is
expressed as "1 unit of the symbol = X units of the base currency".

A failing feed never raises: the affected bucket is logged and dropped so
callers keep whatever value they already had.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

CRYPTO_IDS: Dict[str, str] = {
    'BTC': 'bitcoin',
    'ETH': 'ethereum',
    'USDT': 'tether',
    'BNB': 'binancecoin',
    'SOL': 'solana',
    'XRP': 'ripple',
    'DOGE': 'dogecoin',
    'ADA': 'cardano',
    'DOT': 'polkadot',
    'MATIC': 'matic-network',
}

# legacy Ghanaian cedi code kept by the catalogue; the feed only knows GHS
SYMBOL_ALIASES = {'GHC': 'GHS'}


class RateFetchError(Exception):
    """Raised internally when a feed answers with something unusable."""
    pass


def api_symbol(symbol: str) -> str:
    upper = (symbol or '').upper()
    return SYMBOL_ALIASES.get(upper, upper)


def is_crypto(symbol: str) -> bool:
    return (symbol or '').upper() in CRYPTO_IDS


def _to_decimal(value) -> Optional[Decimal]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        d = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not d.is_finite():
        return None
    return d


class RatesClient:
    def __init__(
        self,
        fiat_url: Optional[str] = None,
        crypto_url: Optional[str] = None,
        fiat_timeout: Optional[float] = None,
        crypto_timeout: Optional[float] = None,
    ):
        self.fiat_url = (fiat_url or settings.FIAT_RATES_URL).rstrip('/')
        self.crypto_url = crypto_url or settings.CRYPTO_PRICES_URL
        self.fiat_timeout = fiat_timeout if fiat_timeout is not None else settings.FIAT_RATES_TIMEOUT
        self.crypto_timeout = crypto_timeout if crypto_timeout is not None else settings.CRYPTO_RATES_TIMEOUT
        self.connect_timeout = settings.RATES_CONNECT_TIMEOUT

    # -- raw feeds -----------------------------------------------------------

    def latest_fiat_table(self, base: str) -> Dict[str, object]:
        """``{code: units of code per 1 base}`` straight from the fiat feed."""
        url = f"{self.fiat_url}/{api_symbol(base)}"
        resp = requests.get(url, timeout=(self.connect_timeout, self.fiat_timeout))
        resp.raise_for_status()
        data = resp.json()
        rates = data.get('rates') if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise RateFetchError(f'fiat feed returned no rates table for {base}')
        return rates

    def crypto_usd_prices(self, ids: List[str]) -> Dict[str, object]:
        resp = requests.get(
            self.crypto_url,
            params={'ids': ','.join(ids), 'vs_currencies': 'usd'},
            headers={'Accept': 'application/json'},
            timeout=(self.connect_timeout, self.crypto_timeout),
        )
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise RateFetchError('crypto feed returned a non-object payload')
        return data

    # -- buckets -------------------------------------------------------------

    def _fiat_bucket(self, symbols: List[str], base: str) -> Dict[str, Decimal]:
        out: Dict[str, Decimal] = {}
        try:
            table = self.latest_fiat_table(base)
        except (requests.RequestException, ValueError, RateFetchError) as exc:
            logger.warning('Fiat rate fetch failed (base %s): %s', base, exc)
            return out

        base_code = api_symbol(base)
        for symbol in symbols:
            code = api_symbol(symbol)
            if code == base_code:
                out[symbol] = Decimal('1')
                continue
            per_base = _to_decimal(table.get(code))
            if per_base is None or per_base <= 0:
                logger.warning('Fiat feed has no usable rate for %s', symbol)
                continue
            out[symbol] = Decimal('1') / per_base
        logger.info('Fetched %d/%d fiat rates (base %s)', len(out), len(symbols), base)
        return out

    def _usd_to_base(self, base: str) -> Decimal:
        """Units of ``base`` per 1 USD."""
        base_code = api_symbol(base)
        if base_code == 'USD':
            return Decimal('1')
        table = self.latest_fiat_table('USD')
        value = _to_decimal(table.get(base_code))
        if value is None or value <= 0:
            raise RateFetchError(f'no USD->{base} rate available')
        return value

    def _crypto_bucket(self, symbols: List[str], base: str) -> Dict[str, Decimal]:
        out: Dict[str, Decimal] = {}
        ids = sorted({CRYPTO_IDS[s.upper()] for s in symbols})
        try:
            prices = self.crypto_usd_prices(ids)
            multiplier = self._usd_to_base(base)
        except (requests.RequestException, ValueError, RateFetchError) as exc:
            logger.warning('Crypto rate fetch failed, keeping previous values: %s', exc)
            return out

        for symbol in symbols:
            entry = prices.get(CRYPTO_IDS[symbol.upper()])
            usd = _to_decimal(entry.get('usd')) if isinstance(entry, dict) else None
            if usd is None or usd <= 0:
                logger.warning('Crypto feed has no usable price for %s', symbol)
                continue
            out[symbol] = usd * multiplier
        logger.info('Fetched %d/%d crypto prices (base %s)', len(out), len(symbols), base)
        return out

    def fetch_rates(self, symbols: Iterable[str], base: str) -> Dict[str, Decimal]:
        """Return ``{symbol: rate in base}`` for every symbol a feed could price.

        Keys are the symbols exactly as given; symbols that could not be priced
        are simply absent.
        """
        symbols = [s for s in symbols if s]
        base = (base or settings.DEFAULT_BASE_CURRENCY).upper()
        fiat = [s for s in symbols if not is_crypto(s)]
        crypto = [s for s in symbols if is_crypto(s)]

        rates: Dict[str, Decimal] = {}
        if fiat:
            rates.update(self._fiat_bucket(fiat, base))
        if crypto:
            rates.update(self._crypto_bucket(crypto, base))
        return rates


def fetch_rates(symbols: Iterable[str], base: str) -> Dict[str, Decimal]:
    return RatesClient().fetch_rates(symbols, base)
