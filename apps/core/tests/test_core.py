import os
import shutil
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIClient, APIRequestFactory
from rest_framework.request import Request

from apps.core.exceptions import api_exception_handler
from apps.core.pagination import parse_pagination
from apps.core.uploads import (
    PRODUCT_IMAGE,
    VIDEO_FILE,
    remove_public_file,
    save_upload,
    unique_filename,
    validate_upload,
)


class HealthTests(SimpleTestCase):
    def test_health_ok(self):
        r = APIClient().get('/api/health')
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {'status': 'ok'})


class ExceptionHandlerTests(SimpleTestCase):
    def test_field_errors_are_flattened_into_message(self):
        resp = api_exception_handler(ValidationError({'name': ['This field is required.']}), {})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.data['message'], 'This field is required.')
        self.assertIn('name', resp.data['errors'])

    def test_unknown_error_becomes_generic_500(self):
        resp = api_exception_handler(RuntimeError('db password leaked'), {})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.data, {'message': 'Internal server error'})


class PaginationTests(SimpleTestCase):
    def _request(self, query):
        return Request(APIRequestFactory().get('/x', query))

    def test_defaults_and_garbage_fall_back(self):
        self.assertEqual(parse_pagination(self._request({}), 20), (1, 20))
        self.assertEqual(parse_pagination(self._request({'page': 'abc', 'limit': ''}), 10), (1, 10))

    def test_limit_bounds(self):
        with self.assertRaises(ValidationError):
            parse_pagination(self._request({'limit': '101'}))
        with self.assertRaises(ValidationError):
            parse_pagination(self._request({'page': '-2'}))


class UploadTests(SimpleTestCase):
    def setUp(self):
        self.root = tempfile.mkdtemp()
        self.override = override_settings(PUBLIC_ROOT=self.root)
        self.override.enable()

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.root, ignore_errors=True)

    def test_unique_filename_is_sanitised(self):
        name = unique_filename('My Card (1).PNG')
        self.assertTrue(name.startswith('my-card--1--'))
        self.assertTrue(name.endswith('.png'))

    def test_image_needs_extension_and_mime(self):
        with self.assertRaises(ValidationError):
            validate_upload(SimpleUploadedFile('x.png', b'1', content_type='text/plain'), PRODUCT_IMAGE)
        validate_upload(SimpleUploadedFile('x.png', b'1', content_type='image/png'), PRODUCT_IMAGE)

    def test_video_accepts_either_signal(self):
        validate_upload(SimpleUploadedFile('clip.bin', b'1', content_type='video/mp4'), VIDEO_FILE)
        validate_upload(SimpleUploadedFile('clip.mov', b'1', content_type='application/octet-stream'), VIDEO_FILE)

    def test_save_and_remove(self):
        path = save_upload(SimpleUploadedFile('a.png', b'png', content_type='image/png'), PRODUCT_IMAGE)
        self.assertTrue(path.startswith('/images/products/a-'))
        on_disk = os.path.join(self.root, path.lstrip('/'))
        self.assertTrue(os.path.exists(on_disk))
        self.assertTrue(remove_public_file(path))
        self.assertFalse(os.path.exists(on_disk))
        # second delete is a no-op
        self.assertFalse(remove_public_file(path))
        self.assertFalse(remove_public_file('https://cdn.example.com/a.png'))
