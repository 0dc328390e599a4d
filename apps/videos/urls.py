from django.urls import path

from apps.core.media import ADMIN_DETAIL_ACTIONS, ADMIN_LIST_ACTIONS
from .views import PublicVideosView, VideoViewSet

public_urlpatterns = [
    path('videos', PublicVideosView.as_view(), name='public-videos'),
]

admin_urlpatterns = [
    path('videos', VideoViewSet.as_view(ADMIN_LIST_ACTIONS), name='admin-videos'),
    path('videos/<int:id>', VideoViewSet.as_view(ADMIN_DETAIL_ACTIONS), name='admin-video-detail'),
]
