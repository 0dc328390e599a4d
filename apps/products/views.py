from __future__ import annotations

import json
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.pagination import paginate
from apps.core.uploads import PRODUCT_IMAGE, remove_public_file, save_upload, validate_upload
from apps.users.permissions import RequireAdminRole
from .models import Product
from .serializers import ProductSerializer, ProductWriteSerializer

logger = logging.getLogger(__name__)

ADMIN_PERMISSIONS = [IsAuthenticated, RequireAdminRole]


def _kept_images(request):
    """Image paths sent back in the body (``images`` as a JSON string or list), or None."""
    data = request.data
    if hasattr(data, 'getlist'):
        # multipart parts under ``images`` may be files; only strings are kept paths
        values = [v for v in data.getlist('images') if isinstance(v, str)]
        if not values:
            return None
    else:
        if 'images' not in data or data['images'] is None:
            return None
        raw = data['images']
        values = raw if isinstance(raw, list) else [raw]
    if len(values) == 1 and isinstance(values[0], str) and values[0].strip().startswith('['):
        try:
            values = json.loads(values[0])
        except ValueError:
            raise ValidationError('images must be a JSON array of paths')
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValidationError('images must be a list of paths')
    return [v for v in values if v]


def _store_uploads(request, existing_count: int) -> list:
    files = request.FILES.getlist('images')
    if existing_count + len(files) > Product.MAX_IMAGES:
        raise ValidationError(f'A product can have at most {Product.MAX_IMAGES} images')
    for f in files:
        validate_upload(f, PRODUCT_IMAGE)
    return [save_upload(f, PRODUCT_IMAGE) for f in files]


def _get_product(id: int) -> Product:
    try:
        return Product.objects.get(id=id)
    except Product.DoesNotExist:
        raise NotFound('Product not found')


class PublicProductsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses={200: None})
    def get(self, request):
        qs = Product.objects.filter(status=Product.Status.ACTIVE).order_by('-created_at')
        return Response(paginate(request, qs, ProductSerializer, key='products', default_limit=20))


class PublicProductDetailView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses=ProductSerializer)
    def get(self, request, id: int):
        return Response(ProductSerializer(_get_product(id)).data)


class AdminProductsView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Products"], responses={200: None})
    def get(self, request):
        qs = Product.objects.order_by('-created_at')
        return Response(paginate(request, qs, ProductSerializer, key='products', default_limit=20))

    @extend_schema(tags=["Admin Products"], request=ProductWriteSerializer, responses=ProductSerializer)
    def post(self, request):
        payload = ProductWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        kept = _kept_images(request) or []
        images = kept + _store_uploads(request, len(kept))
        product = Product.objects.create(images=images or None, **payload.model_values())
        logger.info('Product %s created with %d images', product.id, len(images))
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class AdminProductDetailView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Products"], responses=ProductSerializer)
    def get(self, request, id: int):
        return Response(ProductSerializer(_get_product(id)).data)

    @extend_schema(tags=["Admin Products"], request=ProductWriteSerializer, responses=ProductSerializer)
    def put(self, request, id: int):
        product = _get_product(id)
        payload = ProductWriteSerializer(product, data=request.data, partial=True)
        payload.is_valid(raise_exception=True)

        old_images = list(product.images or [])
        kept = _kept_images(request)
        images = list(old_images if kept is None else kept)
        images += _store_uploads(request, len(images))

        for attr, value in payload.model_values().items():
            setattr(product, attr, value)
        product.images = images or None
        product.save()

        for path in old_images:
            if path not in images:
                remove_public_file(path, default_subdir=PRODUCT_IMAGE.subdir)
        return Response(ProductSerializer(product).data)

    @extend_schema(tags=["Admin Products"], responses={200: None})
    def delete(self, request, id: int):
        product = _get_product(id)
        images = list(product.images or [])
        product.delete()
        for path in images:
            remove_public_file(path, default_subdir=PRODUCT_IMAGE.subdir)
        return Response({'message': 'Deleted'})
