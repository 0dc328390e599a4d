from django.urls import path

from apps.core.media import ADMIN_DETAIL_ACTIONS, ADMIN_LIST_ACTIONS
from .views import CarouselViewSet, CompanyImageViewSet, PublicCarouselsView, PublicCompanyImagesView

public_urlpatterns = [
    path('carousels', PublicCarouselsView.as_view(), name='public-carousels'),
    path('company-images', PublicCompanyImagesView.as_view(), name='public-company-images'),
]

admin_urlpatterns = [
    path('carousels', CarouselViewSet.as_view(ADMIN_LIST_ACTIONS), name='admin-carousels'),
    path('carousels/<int:id>', CarouselViewSet.as_view(ADMIN_DETAIL_ACTIONS), name='admin-carousel-detail'),
    path('company-images', CompanyImageViewSet.as_view(ADMIN_LIST_ACTIONS), name='admin-company-images'),
    path('company-images/<int:id>', CompanyImageViewSet.as_view(ADMIN_DETAIL_ACTIONS), name='admin-company-image-detail'),
]
