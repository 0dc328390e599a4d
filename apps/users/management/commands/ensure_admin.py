from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model


class Command(BaseCommand):
    help = "Ensure a back-office admin user exists"

    def add_arguments(self, parser):
        parser.add_argument('--username', default='admin')
        parser.add_argument('--email', default='admin@example.com')
        parser.add_argument('--password', default='admin123')
        parser.add_argument('--reset-password', action='store_true',
                            help='Overwrite the password of an existing user')

    def handle(self, *args, **opts):
        User = get_user_model()
        username = opts['username']
        u, created = User.objects.get_or_create(username=username, defaults={
            'email': opts['email'],
            'is_staff': True,
            'is_superuser': True,
            'role': User.Roles.ADMIN,
        })
        if created or opts['reset_password']:
            u.set_password(opts['password'])
            u.save()
        state = 'created' if created else 'exists'
        self.stdout.write(f"USERNAME={u.username} ({state})")
