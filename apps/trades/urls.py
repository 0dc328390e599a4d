from django.urls import path

from .views import AdminTradeDetailView, AdminTradesView, PublicTradesView

public_urlpatterns = [
    path('trades', PublicTradesView.as_view(), name='public-trades'),
]

admin_urlpatterns = [
    path('trades', AdminTradesView.as_view(), name='admin-trades'),
    path('trades/<int:id>', AdminTradeDetailView.as_view(), name='admin-trade-detail'),
]
