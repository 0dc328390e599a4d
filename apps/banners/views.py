from rest_framework.exceptions import ValidationError

from apps.core.media import ActiveListView, UploadedMediaViewSet
from apps.core.uploads import CAROUSEL_IMAGE, COMPANY_IMAGE
from .models import Carousel, CompanyImage
from .serializers import CarouselSerializer, CompanyImageSerializer


class PublicCarouselsView(ActiveListView):
    serializer_class = CarouselSerializer


class PublicCompanyImagesView(ActiveListView):
    serializer_class = CompanyImageSerializer


class CarouselViewSet(UploadedMediaViewSet):
    """
    GET    /api/admin/carousels        all slides, active or not
    POST   /api/admin/carousels        multipart ``image`` or ``imageUrl``
    PUT    /api/admin/carousels/{id}   replacing the image deletes the old file
    DELETE /api/admin/carousels/{id}
    """

    serializer_class = CarouselSerializer
    upload_kind = CAROUSEL_IMAGE


class CompanyImageViewSet(UploadedMediaViewSet):
    serializer_class = CompanyImageSerializer
    upload_kind = COMPANY_IMAGE

    def check_write(self, instance, validated_data):
        default = instance.is_active if instance is not None else True
        will_be_active = validated_data.get('is_active', default)
        if not will_be_active or (instance is not None and instance.is_active):
            return
        if CompanyImage.objects.filter(is_active=True).count() >= CompanyImage.MAX_ACTIVE:
            raise ValidationError(
                f'At most {CompanyImage.MAX_ACTIVE} company images can be active, deactivate one first'
            )
