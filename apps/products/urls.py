from django.urls import path

from .views import AdminProductDetailView, AdminProductsView, PublicProductDetailView, PublicProductsView

public_urlpatterns = [
    path('products', PublicProductsView.as_view(), name='public-products'),
    path('products/<int:id>', PublicProductDetailView.as_view(), name='public-product-detail'),
]

admin_urlpatterns = [
    path('products', AdminProductsView.as_view(), name='admin-products'),
    path('products/<int:id>', AdminProductDetailView.as_view(), name='admin-product-detail'),
]
