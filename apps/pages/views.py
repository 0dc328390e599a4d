from __future__ import annotations

import logging

from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.permissions import RequireAdminRole
from .models import Content, SocialButton
from .serializers import (
    ContentSerializer,
    SocialButtonBatchItemSerializer,
    SocialButtonBatchSerializer,
    SocialButtonSerializer,
)

logger = logging.getLogger(__name__)

ADMIN_PERMISSIONS = [IsAuthenticated, RequireAdminRole]


class PublicContentView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses=ContentSerializer)
    def get(self, request):
        return Response(ContentSerializer(Content.load()).data)


class AdminContentView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Content"], responses=ContentSerializer)
    def get(self, request):
        return Response(ContentSerializer(Content.load()).data)

    @extend_schema(tags=["Admin Content"], request=ContentSerializer, responses=ContentSerializer)
    def put(self, request):
        serializer = ContentSerializer(Content.load(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class PublicSocialButtonsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses=SocialButtonSerializer(many=True))
    def get(self, request):
        qs = SocialButton.objects.filter(is_active=True).order_by('sort_order')
        return Response(SocialButtonSerializer(qs, many=True).data)


class AdminSocialButtonsView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Social Buttons"], responses=SocialButtonSerializer(many=True))
    def get(self, request):
        qs = SocialButton.objects.order_by('sort_order', '-created_at')
        return Response(SocialButtonSerializer(qs, many=True).data)

    @extend_schema(tags=["Admin Social Buttons"], request=SocialButtonSerializer, responses=SocialButtonSerializer)
    def post(self, request):
        serializer = SocialButtonSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class AdminSocialButtonDetailView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Social Buttons"], request=SocialButtonSerializer, responses=SocialButtonSerializer)
    def put(self, request, id: int):
        try:
            button = SocialButton.objects.get(id=id)
        except SocialButton.DoesNotExist:
            raise NotFound('Social button not found')
        serializer = SocialButtonSerializer(button, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    @extend_schema(tags=["Admin Social Buttons"], responses={200: None})
    def delete(self, request, id: int):
        deleted, _ = SocialButton.objects.filter(id=id).delete()
        if not deleted:
            raise NotFound('Social button not found')
        return Response({'message': 'Deleted'})


class AdminSocialButtonBatchView(APIView):
    """Reorder / toggle several buttons at once; nothing is written if any id is unknown."""

    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Social Buttons"], request=SocialButtonBatchSerializer, responses={200: None})
    def put(self, request):
        payload = SocialButtonBatchSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        items = payload.validated_data['buttons']

        ids = [item['id'] for item in items]
        existing = set(SocialButton.objects.filter(id__in=ids).values_list('id', flat=True))
        missing = [i for i in ids if i not in existing]
        if missing:
            raise NotFound(f"Social buttons not found: {', '.join(str(i) for i in missing)}")

        item_serializer = SocialButtonBatchItemSerializer()
        with transaction.atomic():
            for item in items:
                changes = item_serializer.changes(item)
                if changes:
                    SocialButton.objects.filter(id=item['id']).update(**changes)
        logger.info('Batch updated %d social buttons', len(items))
        return Response({'message': 'Social buttons updated', 'updated': len(items)})
