from django.urls import path

from .views import (
    AdminContentView,
    AdminSocialButtonBatchView,
    AdminSocialButtonDetailView,
    AdminSocialButtonsView,
    PublicContentView,
    PublicSocialButtonsView,
)

public_urlpatterns = [
    path('content', PublicContentView.as_view(), name='public-content'),
    path('social-buttons', PublicSocialButtonsView.as_view(), name='public-social-buttons'),
]

admin_urlpatterns = [
    path('content', AdminContentView.as_view(), name='admin-content'),
    path('social-buttons', AdminSocialButtonsView.as_view(), name='admin-social-buttons'),
    path('social-buttons/batch', AdminSocialButtonBatchView.as_view(), name='admin-social-buttons-batch'),
    path('social-buttons/<int:id>', AdminSocialButtonDetailView.as_view(), name='admin-social-button-detail'),
]
