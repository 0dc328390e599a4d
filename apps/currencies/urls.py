from django.urls import path

from .views import (
    AdminBaseCurrencyView,
    AdminExchangeRateDetailView,
    AdminExchangeRatesView,
    AdminSystemConfigView,
    AdminUpdateRatesView,
    PublicExchangeRatesView,
)

public_urlpatterns = [
    path('exchange-rates', PublicExchangeRatesView.as_view(), name='public-exchange-rates'),
]

admin_urlpatterns = [
    path('exchange-rates', AdminExchangeRatesView.as_view(), name='admin-exchange-rates'),
    path('exchange-rates/update', AdminUpdateRatesView.as_view(), name='admin-exchange-rates-update'),
    path('exchange-rates/<int:id>', AdminExchangeRateDetailView.as_view(), name='admin-exchange-rate-detail'),
    path('config/base-currency', AdminBaseCurrencyView.as_view(), name='admin-base-currency'),
    path('config', AdminSystemConfigView.as_view(), name='admin-system-config'),
]
