from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken


class AdminLoginTests(TestCase):
    def setUp(self):
        self.api = APIClient()
        self.user = get_user_model().objects.create_user(username='admin', password='secret', role='admin')

    def test_login_returns_bearer_token_with_role(self):
        resp = self.api.post('/api/admin/login', {'username': 'admin', 'password': 'secret'}, format='json')
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body['token'], body['access'])
        self.assertEqual(body['user']['username'], 'admin')
        token = AccessToken(body['token'])
        self.assertEqual(token['role'], 'admin')

        self.api.credentials(HTTP_AUTHORIZATION=f"Bearer {body['token']}")
        self.assertEqual(self.api.get('/api/admin/stats').status_code, 200)

    def test_missing_fields_is_400(self):
        resp = self.api.post('/api/admin/login', {'username': 'admin'}, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_wrong_password_is_401(self):
        resp = self.api.post('/api/admin/login', {'username': 'admin', 'password': 'nope'}, format='json')
        self.assertEqual(resp.status_code, 401)
        self.assertIn('message', resp.json())

    def test_operator_cannot_log_in(self):
        get_user_model().objects.create_user(username='op', password='secret', role='operator')
        resp = self.api.post('/api/admin/login', {'username': 'op', 'password': 'secret'}, format='json')
        self.assertEqual(resp.status_code, 401)


class EnsureAdminCommandTests(TestCase):
    def test_creates_once_and_keeps_password_unless_reset(self):
        out = StringIO()
        call_command('ensure_admin', '--username', 'root', '--password', 'first', stdout=out)
        self.assertIn('created', out.getvalue())
        user = get_user_model().objects.get(username='root')
        self.assertTrue(user.check_password('first'))
        self.assertEqual(user.role, 'admin')

        call_command('ensure_admin', '--username', 'root', '--password', 'second', stdout=StringIO())
        user.refresh_from_db()
        self.assertTrue(user.check_password('first'))

        call_command('ensure_admin', '--username', 'root', '--password', 'second', '--reset-password', stdout=StringIO())
        user.refresh_from_db()
        self.assertTrue(user.check_password('second'))
