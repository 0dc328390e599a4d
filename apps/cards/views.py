import os

from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.media import ADMIN_PERMISSIONS, ActiveListView, UploadedMediaViewSet
from apps.core.uploads import CARD_IMAGE, save_upload
from .serializers import SupportedCardSerializer


class PublicSupportedCardsView(ActiveListView):
    serializer_class = SupportedCardSerializer
    ordering = ('sort_order',)


class SupportedCardViewSet(UploadedMediaViewSet):
    serializer_class = SupportedCardSerializer
    upload_kind = CARD_IMAGE
    upload_field = 'logo'
    url_attr = 'logo_url'
    file_required = False


class SupportedCardUploadView(APIView):
    """Store a card logo and return its public path for a later create/update."""

    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Supported Cards"], request=None, responses={200: None})
    def post(self, request):
        uploaded = request.FILES.get('image')
        if uploaded is None:
            raise ValidationError('Please choose an image to upload')
        path = save_upload(uploaded, CARD_IMAGE)
        return Response({'message': 'Uploaded', 'path': path, 'filename': os.path.basename(path)})
