import logging

from celery.signals import worker_ready
from django.conf import settings

logger = logging.getLogger(__name__)


@worker_ready.connect
def refresh_rates_on_worker_start(sender=None, **kwargs):
    if not getattr(settings, 'RATE_REFRESH_ON_STARTUP', True):
        return
    from .tasks import refresh_exchange_rates

    logger.info('Worker ready, queueing initial exchange rate refresh')
    refresh_exchange_rates.delay()
