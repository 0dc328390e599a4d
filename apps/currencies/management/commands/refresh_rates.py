from django.core.management.base import BaseCommand

from apps.currencies.services import update_all_rates


class Command(BaseCommand):
    help = "Fetch live rates and update every stored exchange rate once"

    def handle(self, *args, **opts):
        result = update_all_rates()
        self.stdout.write(f"UPDATED={result.updated} SKIPPED={result.skipped}")
        if result.skipped_symbols:
            self.stdout.write(f"SKIPPED_SYMBOLS={','.join(result.skipped_symbols)}")
