from apps.core.media import ActiveListView, UploadedMediaViewSet
from apps.core.uploads import VIDEO_FILE
from .models import Video
from .serializers import VideoSerializer


class PublicVideosView(ActiveListView):
    serializer_class = VideoSerializer

    def filter_queryset(self, qs):
        video_type = self.request.query_params.get('type')
        if video_type in Video.Type.values:
            qs = qs.filter(type=video_type)
        return qs


class VideoViewSet(UploadedMediaViewSet):
    serializer_class = VideoSerializer
    upload_kind = VIDEO_FILE
    upload_field = 'video'
    url_attr = 'video_url'
    extra_file_attrs = ('thumbnail_url',)
    required_message = 'A video file or URL is required'
