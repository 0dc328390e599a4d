from importlib import import_module

from django.conf import settings
from django.contrib import admin
from django.shortcuts import redirect
from django.urls import include, path, re_path
from django.views.static import serve
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.core.views import health
from apps.users.views import LoginView

API_PREFIX = settings.API_PREFIX.strip("/")

PUBLIC_APPS = ("currencies", "conversion", "products", "trades", "banners", "cards", "videos", "pages")
ADMIN_APPS = PUBLIC_APPS + ("dashboard",)


def _routes(app: str, kind: str):
    patterns = getattr(import_module(f"apps.{app}.urls"), f"{kind}_urlpatterns")
    return include((patterns, app), namespace=f"{kind}-{app}")


urlpatterns = [
    path("admin/", admin.site.urls),
    path(f"{API_PREFIX}/health", health, name="health"),
    path(f"{API_PREFIX}/schema", SpectacularAPIView.as_view(), name="schema"),
    path(f"{API_PREFIX}/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    path(f"{API_PREFIX}/admin/login", LoginView.as_view(), name="admin-login"),
]
# storefront, no auth
urlpatterns += [path(f"{API_PREFIX}/public/", _routes(app, "public")) for app in PUBLIC_APPS]
# back office, Bearer JWT + admin role
urlpatterns += [path(f"{API_PREFIX}/admin/", _routes(app, "admin")) for app in ADMIN_APPS]

# uploaded images and videos live outside STATIC_ROOT
if settings.SERVE_PUBLIC_FILES:
    urlpatterns += [
        re_path(r"^(?P<path>(?:images|videos)/.*)$", serve, {"document_root": str(settings.PUBLIC_ROOT)}),
    ]

# Developer convenience: when DEBUG, redirect root to API docs
if settings.DEBUG:
    urlpatterns.insert(0, path("", lambda request: redirect(f"/{API_PREFIX}/docs")))
