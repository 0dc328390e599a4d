from django.core.management.base import BaseCommand

from apps.conversion.models import ConversionConfig


class Command(BaseCommand):
    help = "Create the conversion config row with default rates if it does not exist"

    def handle(self, *args, **opts):
        existed = ConversionConfig.objects.exists()
        config = ConversionConfig.get_solo()
        state = 'exists' if existed else 'created'
        self.stdout.write(
            f"CONVERSION_CONFIG={config.pk} ({state}) R_RATE={config.r_rate} "
            f"FEE={config.service_fee_percent} NGN={config.ngn_rate} GHC={config.ghc_rate}"
        )
