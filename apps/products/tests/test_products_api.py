import json
import os
import shutil
import tempfile

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from apps.products.models import Product


def png(name='card.png'):
    return SimpleUploadedFile(name, b'\x89PNG\r\n\x1a\nfake', content_type='image/png')


class ProductApiTests(TestCase):
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

    def _on_disk(self, public_path):
        return os.path.exists(os.path.join(self.public_root, public_path.lstrip('/')))

    def _base_fields(self, **extra):
        fields = {
            'name': 'Steam Card',
            'category': 'Games',
            'exchangeRate': '6.8',
            'minAmount': '10',
            'maxAmount': '500',
        }
        fields.update(extra)
        return fields

    def test_create_with_uploaded_images(self):
        resp = self.api.post('/api/admin/products', self._base_fields(images=[png('a.png'), png('b.png')]), format='multipart')
        self.assertEqual(resp.status_code, 201, resp.content)
        images = resp.json()['images']
        self.assertEqual(len(images), 2)
        self.assertTrue(all(p.startswith('/images/products/') for p in images))
        self.assertTrue(all(self._on_disk(p) for p in images))
        self.assertEqual(resp.json()['status'], 'active')

    def test_create_validation(self):
        resp = self.api.post('/api/admin/products', self._base_fields(maxAmount='5'), format='multipart')
        self.assertEqual(resp.status_code, 400)
        self.assertIn('maxAmount', resp.json()['errors'])

        resp = self.api.post('/api/admin/products', self._base_fields(exchangeRate='0'), format='multipart')
        self.assertEqual(resp.status_code, 400)

        bad = SimpleUploadedFile('notes.txt', b'hello', content_type='text/plain')
        resp = self.api.post('/api/admin/products', self._base_fields(images=[bad]), format='multipart')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(Product.objects.count(), 0)

    def test_at_most_ten_images(self):
        files = [png(f'{i}.png') for i in range(11)]
        resp = self.api.post('/api/admin/products', self._base_fields(images=files), format='multipart')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(os.listdir(self.public_root), [])

    def test_update_keeps_listed_images_and_removes_the_rest(self):
        created = self.api.post('/api/admin/products', self._base_fields(images=[png('a.png'), png('b.png')]), format='multipart').json()
        keep, drop = created['images']

        resp = self.api.put(
            f"/api/admin/products/{created['id']}",
            {'images': [json.dumps([keep]), png('c.png')], 'name': 'Steam Gift'},
            format='multipart',
        )
        self.assertEqual(resp.status_code, 200, resp.content)
        images = resp.json()['images']
        self.assertEqual(images[0], keep)
        self.assertEqual(len(images), 2)
        self.assertEqual(resp.json()['name'], 'Steam Gift')
        self.assertFalse(self._on_disk(drop))
        self.assertTrue(self._on_disk(keep))

    def test_update_without_image_list_appends_uploads(self):
        created = self.api.post('/api/admin/products', self._base_fields(images=[png('a.png')]), format='multipart').json()
        resp = self.api.put(f"/api/admin/products/{created['id']}", {'images': [png('b.png')]}, format='multipart')
        self.assertEqual(len(resp.json()['images']), 2)

    def test_update_with_empty_json_list_clears_images(self):
        created = self.api.post('/api/admin/products', self._base_fields(images=[png('a.png')]), format='multipart').json()
        old = created['images'][0]

        resp = self.api.put(f"/api/admin/products/{created['id']}", {'images': []}, format='json')
        self.assertEqual(resp.status_code, 200, resp.content)
        self.assertFalse(resp.json()['images'])
        self.assertFalse(Product.objects.get(id=created['id']).images)
        self.assertFalse(self._on_disk(old))

        # leaving the key out keeps what is stored
        created = self.api.post('/api/admin/products', self._base_fields(images=[png('b.png')]), format='multipart').json()
        resp = self.api.put(f"/api/admin/products/{created['id']}", {'name': 'Renamed'}, format='json')
        self.assertEqual(resp.json()['images'], created['images'])

    def test_update_checks_amounts_against_stored_values(self):
        created = self.api.post('/api/admin/products', self._base_fields(), format='multipart').json()
        resp = self.api.put(f"/api/admin/products/{created['id']}", {'maxAmount': '10'}, format='multipart')
        self.assertEqual(resp.status_code, 400)

    def test_delete_removes_files_and_tolerates_missing_ones(self):
        created = self.api.post('/api/admin/products', self._base_fields(images=[png('a.png')]), format='multipart').json()
        product = Product.objects.get(id=created['id'])
        product.images = product.images + ['/images/products/gone.png', 'https://cdn.example.com/x.png']
        product.save()

        resp = self.api.delete(f"/api/admin/products/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(self._on_disk(created['images'][0]))
        self.assertEqual(self.api.delete(f"/api/admin/products/{created['id']}").status_code, 404)

    def test_public_lists_only_active_with_pagination(self):
        for i in range(3):
            Product.objects.create(name=f'P{i}', category='c', exchange_rate=1, min_amount=0, max_amount=10)
        Product.objects.create(name='Hidden', category='c', exchange_rate=1, min_amount=0, max_amount=10, status='inactive')

        body = APIClient().get('/api/public/products?limit=2&page=2').json()
        self.assertEqual(body['total'], 3)
        self.assertEqual(body['totalPages'], 2)
        self.assertEqual(len(body['products']), 1)

        body = APIClient().get('/api/public/products?limit=2&page=5').json()
        self.assertEqual(body['products'], [])

        self.assertEqual(APIClient().get('/api/public/products?limit=101').status_code, 400)
        self.assertEqual(APIClient().get('/api/public/products?page=-1').status_code, 400)

    def test_admin_list_includes_inactive(self):
        Product.objects.create(name='Hidden', category='c', exchange_rate=1, min_amount=0, max_amount=10, status='inactive')
        body = self.api.get('/api/admin/products').json()
        self.assertEqual(body['total'], 1)
        self.assertEqual(body['limit'], 20)
