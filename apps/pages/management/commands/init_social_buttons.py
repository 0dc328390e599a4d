from django.core.management.base import BaseCommand

from apps.pages.defaults import SOCIAL_BUTTONS
from apps.pages.models import SocialButton


class Command(BaseCommand):
    help = "Seed the default floating contact buttons when none exist"

    def handle(self, *args, **opts):
        if SocialButton.objects.exists():
            self.stdout.write(f"Social buttons already present ({SocialButton.objects.count()}), skipping")
            return
        for data in SOCIAL_BUTTONS:
            SocialButton.objects.create(**data)
            state = 'active' if data['is_active'] else 'inactive'
            self.stdout.write(f"  - {data['type']}: {data['label']} ({state})")
        self.stdout.write(self.style.SUCCESS(f"CREATED={len(SOCIAL_BUTTONS)}"))
