from django.urls import path

from apps.core.media import ADMIN_DETAIL_ACTIONS, ADMIN_LIST_ACTIONS
from .views import PublicSupportedCardsView, SupportedCardUploadView, SupportedCardViewSet

public_urlpatterns = [
    path('supported-cards', PublicSupportedCardsView.as_view(), name='public-supported-cards'),
]

admin_urlpatterns = [
    path('supported-cards', SupportedCardViewSet.as_view(ADMIN_LIST_ACTIONS), name='admin-supported-cards'),
    path('supported-cards/upload', SupportedCardUploadView.as_view(), name='admin-supported-cards-upload'),
    path('supported-cards/<int:id>', SupportedCardViewSet.as_view(ADMIN_DETAIL_ACTIONS), name='admin-supported-card-detail'),
]
