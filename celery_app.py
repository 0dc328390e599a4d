"""
Celery configuration for the gift-card exchange backend.

Runs the periodic exchange-rate refresh (see CELERY_BEAT_SCHEDULE) and any
ad-hoc background jobs.

    celery -A celery_app worker -l info
    celery -A celery_app beat -l info
"""
import os
from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('giftex')

# Load configuration from Django settings with CELERY namespace
app.config_from_object('django.conf:settings', namespace='CELERY')

# Picks up apps/<app>/tasks.py for every installed app
app.autodiscover_tasks()
