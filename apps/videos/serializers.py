from rest_framework import serializers

from .models import Video


class VideoSerializer(serializers.ModelSerializer):
    videoUrl = serializers.CharField(source='video_url', max_length=500, required=False, allow_blank=True)
    thumbnailUrl = serializers.CharField(source='thumbnail_url', max_length=500, required=False,
                                         allow_blank=True, allow_null=True)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Video
        fields = ['id', 'title', 'description', 'videoUrl', 'thumbnailUrl', 'type', 'sortOrder', 'isActive',
                  'createdAt', 'updatedAt']
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True, 'allow_null': True},
        }
