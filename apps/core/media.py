"""
Admin CRUD for records that own an uploaded file (carousel slides, company
images, card logos, videos).

The file comes either as a multipart part (``upload_field``) or as a plain
path/URL in the body. When the stored path changes or the record is
deleted, the previous local file is removed best-effort.
"""
from __future__ import annotations

import logging
from typing import Sequence

from rest_framework import status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.permissions import RequireAdminRole
from .uploads import UploadKind, remove_public_file, save_upload, validate_upload

logger = logging.getLogger(__name__)

ADMIN_PERMISSIONS = [IsAuthenticated, RequireAdminRole]

# PUT behaves like PATCH: only the fields sent are changed
ADMIN_LIST_ACTIONS = {'get': 'list', 'post': 'create'}
ADMIN_DETAIL_ACTIONS = {'get': 'retrieve', 'put': 'partial_update', 'patch': 'partial_update', 'delete': 'destroy'}


class UploadedMediaViewSet(viewsets.ModelViewSet):
    permission_classes = ADMIN_PERMISSIONS
    lookup_field = 'id'
    ordering: Sequence[str] = ('sort_order', '-created_at')

    upload_kind: UploadKind = None
    upload_field = 'image'
    url_attr = 'image_url'
    # other file-backed attributes cleaned up on delete
    extra_file_attrs: Sequence[str] = ()
    file_required = True
    required_message = 'Image is required'

    def get_queryset(self):
        return self.serializer_class.Meta.model.objects.order_by(*self.ordering)

    # hooks

    def check_write(self, instance, validated_data) -> None:
        """Raise ``ValidationError`` to veto a create (instance is None) or update."""

    def _incoming_file(self):
        uploaded = self.request.FILES.get(self.upload_field)
        if uploaded is not None:
            validate_upload(uploaded, self.upload_kind)
        return uploaded

    def perform_create(self, serializer):
        uploaded = self._incoming_file()
        if self.file_required and uploaded is None and not serializer.validated_data.get(self.url_attr):
            raise ValidationError(self.required_message)
        self.check_write(None, serializer.validated_data)
        extra = {}
        if uploaded is not None:
            extra[self.url_attr] = save_upload(uploaded, self.upload_kind)
        serializer.save(**extra)

    def perform_update(self, serializer):
        instance = serializer.instance
        old_url = getattr(instance, self.url_attr)
        uploaded = self._incoming_file()
        self.check_write(instance, serializer.validated_data)
        extra = {}
        if uploaded is not None:
            extra[self.url_attr] = save_upload(uploaded, self.upload_kind)
        elif not serializer.validated_data.get(self.url_attr, old_url):
            # a blank path in the body never clears the stored file
            extra[self.url_attr] = old_url
        saved = serializer.save(**extra)
        if old_url and old_url != getattr(saved, self.url_attr):
            remove_public_file(old_url, default_subdir=self.upload_kind.subdir)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        paths = [getattr(instance, self.url_attr)] + [getattr(instance, a) for a in self.extra_file_attrs]
        instance.delete()
        for path in paths:
            remove_public_file(path, default_subdir=self.upload_kind.subdir)
        return Response({'message': 'Deleted'}, status=status.HTTP_200_OK)


class ActiveListView(APIView):
    """Public read-only list of ``is_active`` rows in display order."""

    permission_classes = [AllowAny]
    serializer_class = None
    ordering: Sequence[str] = ('sort_order', '-created_at')

    def filter_queryset(self, qs):
        return qs

    def get(self, request):
        model = self.serializer_class.Meta.model
        qs = self.filter_queryset(model.objects.filter(is_active=True).order_by(*self.ordering))
        return Response(self.serializer_class(qs, many=True).data)
