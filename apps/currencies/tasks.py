"""
Celery tasks keeping the exchange-rate table fresh.

The beat entry ``refresh-exchange-rates`` (see ``CELERY_BEAT_SCHEDULE``) runs
``refresh_exchange_rates`` every ``RATE_REFRESH_INTERVAL_SECONDS``; a worker
also fires it once when it comes up.
"""
import logging

from celery import shared_task

from .services import update_all_rates

logger = logging.getLogger(__name__)


@shared_task(name='apps.currencies.tasks.refresh_exchange_rates', ignore_result=False)
def refresh_exchange_rates():
    try:
        result = update_all_rates()
    except Exception:
        # next tick retries naturally
        logger.exception('Scheduled exchange rate refresh failed')
        return {'ok': False}
    return {'ok': True, 'updated': result.updated, 'skipped': result.skipped}
