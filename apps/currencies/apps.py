from django.apps import AppConfig


class CurrenciesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.currencies'
    label = 'currencies'

    def ready(self):
        from . import signals  # noqa: F401
