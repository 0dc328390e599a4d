from unittest.mock import MagicMock

import requests

FIAT_URL = 'https://api.exchangerate-api.com/v4/latest'
CRYPTO_URL = 'https://api.coingecko.com/api/v3/simple/price'


def json_response(payload, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status_code} error')
    else:
        resp.raise_for_status.return_value = None
    return resp


def fake_feeds(fiat_tables=None, crypto=None, fail=()):
    """Build a ``requests.get`` replacement.

    ``fiat_tables`` maps a base code to its ``rates`` dict, ``crypto`` is the
    CoinGecko payload; any base code (or ``'crypto'``) listed in ``fail``
    raises a timeout instead.
    """
    fiat_tables = fiat_tables or {}
    calls = []

    def _get(url, params=None, headers=None, timeout=None):
        calls.append({'url': url, 'params': params, 'timeout': timeout})
        if url.startswith(CRYPTO_URL):
            if 'crypto' in fail:
                raise requests.Timeout('crypto feed timed out')
            return json_response(crypto or {})
        base = url.rsplit('/', 1)[-1]
        if base in fail:
            raise requests.Timeout(f'fiat feed timed out for {base}')
        if base not in fiat_tables:
            return json_response({'error': 'unknown'}, status_code=404)
        return json_response({'base': base, 'rates': fiat_tables[base]})

    _get.calls = calls
    return _get
