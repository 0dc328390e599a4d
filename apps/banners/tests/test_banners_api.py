import os
import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from apps.banners.models import Carousel, CompanyImage


def png(name='slide.png'):
    return SimpleUploadedFile(name, b'\x89PNG\r\n\x1a\nfake', content_type='image/png')


class BannerTestCase(TestCase):
    def setUp(self):
        self.public_root = tempfile.mkdtemp()
        self.override = override_settings(PUBLIC_ROOT=self.public_root)
        self.override.enable()
        admin = get_user_model().objects.create_user(username='admin', password='pw', role='admin')
        self.api = APIClient()
        self.api.force_authenticate(admin)

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.public_root, ignore_errors=True)

    def on_disk(self, public_path):
        return os.path.exists(os.path.join(self.public_root, public_path.lstrip('/')))


class CarouselApiTests(BannerTestCase):
    def test_create_requires_image(self):
        resp = self.api.post('/api/admin/carousels', {'title': 'Hello'}, format='multipart')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(Carousel.objects.count(), 0)

    def test_create_with_upload_and_external_url(self):
        resp = self.api.post('/api/admin/carousels', {'title': 'A', 'image': png()}, format='multipart')
        self.assertEqual(resp.status_code, 201, resp.content)
        self.assertTrue(resp.json()['imageUrl'].startswith('/images/carousels/slide-'))
        self.assertTrue(self.on_disk(resp.json()['imageUrl']))
        self.assertTrue(resp.json()['isActive'])

        resp = self.api.post('/api/admin/carousels', {'imageUrl': 'https://cdn.example.com/b.png'}, format='json')
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()['title'], '')

    def test_rejects_non_image_upload(self):
        bad = SimpleUploadedFile('x.exe', b'MZ', content_type='application/octet-stream')
        resp = self.api.post('/api/admin/carousels', {'image': bad}, format='multipart')
        self.assertEqual(resp.status_code, 400)

    def test_replacing_image_deletes_old_file(self):
        created = self.api.post('/api/admin/carousels', {'image': png('old.png')}, format='multipart').json()
        old = created['imageUrl']

        resp = self.api.put(f"/api/admin/carousels/{created['id']}", {'image': png('new.png')}, format='multipart')
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertNotEqual(resp.json()['imageUrl'], old)
        self.assertFalse(self.on_disk(old))
        self.assertTrue(self.on_disk(resp.json()['imageUrl']))

    def test_replacing_when_old_file_is_missing_still_succeeds(self):
        slide = Carousel.objects.create(title='x', image_url='/images/carousels/never-existed.png')
        resp = self.api.put(f'/api/admin/carousels/{slide.id}', {'image': png()}, format='multipart')
        self.assertEqual(resp.status_code, 200)
        slide.refresh_from_db()
        self.assertTrue(slide.image_url.startswith('/images/carousels/slide-'))

    def test_update_without_file_keeps_image(self):
        slide = Carousel.objects.create(title='x', image_url='/images/carousels/a.png')
        resp = self.api.put(f'/api/admin/carousels/{slide.id}', {'title': 'y', 'isActive': 'false'}, format='multipart')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['imageUrl'], '/images/carousels/a.png')
        self.assertFalse(resp.json()['isActive'])

    def test_delete_and_public_listing(self):
        Carousel.objects.create(title='b', image_url='https://cdn/b.png', sort_order=2)
        Carousel.objects.create(title='a', image_url='https://cdn/a.png', sort_order=1)
        hidden = Carousel.objects.create(title='h', image_url='https://cdn/h.png', is_active=False)

        titles = [c['title'] for c in APIClient().get('/api/public/carousels').json()]
        self.assertEqual(titles, ['a', 'b'])
        self.assertEqual(len(self.api.get('/api/admin/carousels').json()), 3)

        self.assertEqual(self.api.delete(f'/api/admin/carousels/{hidden.id}').status_code, 200)
        self.assertEqual(self.api.delete(f'/api/admin/carousels/{hidden.id}').status_code, 404)


class CompanyImageApiTests(BannerTestCase):
    def _create(self, **fields):
        data = {'imageUrl': 'https://cdn.example.com/c.png'}
        data.update(fields)
        return self.api.post('/api/admin/company-images', data, format='json')

    def test_at_most_three_active(self):
        for _ in range(3):
            self.assertEqual(self._create().status_code, 201)
        resp = self._create()
        self.assertEqual(resp.status_code, 400)
        self.assertIn('message', resp.json())
        self.assertEqual(self._create(isActive=False).status_code, 201)

    def test_deleting_active_image_frees_a_slot(self):
        ids = [self._create().json()['id'] for _ in range(3)]
        self.assertEqual(self.api.delete(f'/api/admin/company-images/{ids[0]}').status_code, 200)
        self.assertEqual(self._create().status_code, 201)

    def test_activating_over_cap_is_rejected(self):
        for _ in range(3):
            self._create()
        spare = self._create(isActive=False).json()
        resp = self.api.put(f"/api/admin/company-images/{spare['id']}", {'isActive': True}, format='json')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(CompanyImage.objects.filter(is_active=True).count(), 3)

        # editing an already active image is always allowed
        active = CompanyImage.objects.filter(is_active=True).first()
        resp = self.api.put(f'/api/admin/company-images/{active.id}', {'title': 'renamed'}, format='json')
        self.assertEqual(resp.status_code, 200)

    def test_upload_lands_in_company_folder(self):
        resp = self.api.post('/api/admin/company-images', {'image': png('team.png')}, format='multipart')
        self.assertEqual(resp.status_code, 201, resp.content)
        self.assertTrue(resp.json()['imageUrl'].startswith('/images/company/team-'))
