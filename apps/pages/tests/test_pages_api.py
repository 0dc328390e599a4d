from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from apps.pages.models import Content, SocialButton


class ContentApiTests(TestCase):
    def setUp(self):
        admin = get_user_model().objects.create_user(username='admin', password='pw', role='admin')
        self.api = APIClient()
        self.api.force_authenticate(admin)

    def test_first_public_read_creates_default_copy(self):
        self.assertFalse(Content.objects.exists())
        body = APIClient().get('/api/public/content').json()
        self.assertEqual(body['id'], 1)
        self.assertTrue(body['heroTitle'])
        self.assertEqual(len(body['processSteps']), 4)
        self.assertEqual(len(body['faqs']), 6)
        self.assertEqual(Content.objects.count(), 1)

    def test_admin_put_updates_only_sent_fields(self):
        resp = self.api.put('/api/admin/content', {
            'heroTitle': 'New title',
            'faqs': [{'question': 'Q?', 'answer': 'A.'}],
        }, format='json')
        self.assertEqual(resp.status_code, 200, resp.content)
        content = Content.objects.get(id=1)
        self.assertEqual(content.hero_title, 'New title')
        self.assertEqual(content.faqs, [{'question': 'Q?', 'answer': 'A.'}])
        self.assertEqual(len(content.security_features), 4)
        self.assertEqual(Content.objects.count(), 1)

    def test_admin_put_requires_auth(self):
        self.assertEqual(APIClient().put('/api/admin/content', {}, format='json').status_code, 401)


class SocialButtonApiTests(TestCase):
    def setUp(self):
        admin = get_user_model().objects.create_user(username='admin', password='pw', role='admin')
        self.api = APIClient()
        self.api.force_authenticate(admin)
        call_command('init_social_buttons', stdout=StringIO())

    def test_seed_is_idempotent(self):
        call_command('init_social_buttons', stdout=StringIO())
        self.assertEqual(SocialButton.objects.count(), 5)
        self.assertFalse(SocialButton.objects.get(type='telegram').is_active)

    def test_public_lists_active_in_order(self):
        types = [b['type'] for b in APIClient().get('/api/public/social-buttons').json()]
        self.assertEqual(types, ['whatsapp', 'facebook', 'tiktok', 'instagram'])

    def test_crud(self):
        resp = self.api.post('/api/admin/social-buttons', {'type': 'x', 'label': 'X', 'sortOrder': 9}, format='json')
        self.assertEqual(resp.status_code, 201, resp.content)
        button_id = resp.json()['id']
        resp = self.api.put(f'/api/admin/social-buttons/{button_id}', {'url': 'https://x.com/me'}, format='json')
        self.assertEqual(resp.json()['url'], 'https://x.com/me')
        self.assertEqual(self.api.delete(f'/api/admin/social-buttons/{button_id}').status_code, 200)
        self.assertEqual(self.api.delete(f'/api/admin/social-buttons/{button_id}').status_code, 404)

    def test_batch_update(self):
        wa = SocialButton.objects.get(type='whatsapp')
        tg = SocialButton.objects.get(type='telegram')
        resp = self.api.put('/api/admin/social-buttons/batch', {'buttons': [
            {'id': wa.id, 'sortOrder': 3, 'url': ''},
            {'id': tg.id, 'sortOrder': 1, 'isActive': True, 'label': 'TG'},
        ]}, format='json')
        self.assertEqual(resp.status_code, 200, resp.content)
        wa.refresh_from_db()
        tg.refresh_from_db()
        self.assertEqual(wa.sort_order, 3)
        self.assertIsNone(wa.url)
        self.assertTrue(tg.is_active)
        self.assertEqual(tg.label, 'TG')
        # colours are never touched by the batch endpoint
        self.assertEqual(tg.bg_color, '#0088cc')

    def test_batch_with_unknown_id_changes_nothing(self):
        wa = SocialButton.objects.get(type='whatsapp')
        resp = self.api.put('/api/admin/social-buttons/batch', {'buttons': [
            {'id': wa.id, 'sortOrder': 42},
            {'id': 999999, 'sortOrder': 1},
        ]}, format='json')
        self.assertEqual(resp.status_code, 404)
        self.assertIn('999999', resp.json()['message'])
        wa.refresh_from_db()
        self.assertEqual(wa.sort_order, 1)

    def test_batch_rejects_bad_payloads(self):
        for body in ({}, {'buttons': []}, {'buttons': 'nope'}, {'buttons': [{'sortOrder': 1}]}, {'buttons': [{'id': 0}]}):
            resp = self.api.put('/api/admin/social-buttons/batch', body, format='json')
            self.assertEqual(resp.status_code, 400, body)
