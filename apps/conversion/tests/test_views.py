from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from apps.conversion.models import ConversionConfig


class ConversionApiTests(TestCase):
    def setUp(self):
        self.api = APIClient()
        admin = get_user_model().objects.create_user(username='admin', password='pw', role='admin')
        self.admin_api = APIClient()
        self.admin_api.force_authenticate(admin)

    def test_public_config_creates_defaults(self):
        resp = self.api.get('/api/public/conversion-config')
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body['rRate'], 7.13)
        self.assertEqual(body['serviceFeePercent'], 0.03)
        self.assertEqual(body['cardCategories'], {})
        self.assertNotIn('id', body)
        self.assertEqual(ConversionConfig.objects.count(), 1)

    def test_calculate_with_category_lookup(self):
        config = ConversionConfig.get_solo()
        config.category_rates = {'Xbox': {'Amazon US': {'rate': 7.13, 'currency': 'USD'}}}
        config.save()
        resp = self.api.post('/api/public/conversion/calculate', {
            'amount': 100, 'currency': 'NGN', 'cardType': 'Xbox', 'category': 'Amazon US',
        }, format='json')
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertEqual(resp.json()['payout'], 138322)
        self.assertEqual(resp.json()['categoryCurrency'], 'USD')

    def test_calculate_rejects_unknown_category_and_bad_amount(self):
        resp = self.api.post('/api/public/conversion/calculate', {
            'amount': 100, 'currency': 'NGN', 'cardType': 'Steam', 'category': 'EU',
        }, format='json')
        self.assertEqual(resp.status_code, 400)
        resp = self.api.post('/api/public/conversion/calculate', {'amount': 0, 'currency': 'NGN', 'rate': 1}, format='json')
        self.assertEqual(resp.status_code, 400)
        resp = self.api.post('/api/public/conversion/calculate', {'amount': 5, 'currency': 'NGN'}, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_admin_update_validates_ranges(self):
        url = '/api/admin/conversion-config'
        self.assertEqual(self.admin_api.put(url, {'serviceFeePercent': 1.5}, format='json').status_code, 400)
        self.assertEqual(self.admin_api.put(url, {'rRate': 0}, format='json').status_code, 400)
        self.assertEqual(self.admin_api.put(url, {'ngnRate': -1}, format='json').status_code, 400)

        resp = self.admin_api.put(url, {
            'serviceFeePercent': 0.05,
            'ghcRate': 0.9,
            'cardCategories': {'Steam': ['US', 'EU']},
        }, format='json')
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertEqual(resp.json()['config']['serviceFeePercent'], 0.05)
        self.assertEqual(resp.json()['config']['rRate'], 7.13)
        self.assertEqual(resp.json()['config']['cardCategories'], {'Steam': ['US', 'EU']})

    def test_admin_preview(self):
        resp = self.admin_api.get('/api/admin/conversion-config/preview')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['ngn'], 138322)
        self.assertEqual(self.api.get('/api/admin/conversion-config/preview').status_code, 401)

    def test_init_command_is_idempotent(self):
        call_command('init_conversion_config', stdout=StringIO())
        call_command('init_conversion_config', stdout=StringIO())
        self.assertEqual(ConversionConfig.objects.count(), 1)
