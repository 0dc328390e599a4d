from django.urls import path

from .views import (
    AdminConversionConfigView,
    AdminConversionPreviewView,
    CalculatePayoutView,
    PublicConversionConfigView,
)

public_urlpatterns = [
    path('conversion-config', PublicConversionConfigView.as_view(), name='public-conversion-config'),
    path('conversion/calculate', CalculatePayoutView.as_view(), name='public-conversion-calculate'),
]

admin_urlpatterns = [
    path('conversion-config', AdminConversionConfigView.as_view(), name='admin-conversion-config'),
    path('conversion-config/preview', AdminConversionPreviewView.as_view(), name='admin-conversion-preview'),
]
