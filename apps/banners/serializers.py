from rest_framework import serializers

from .models import Carousel, CompanyImage


class CarouselSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source='image_url', max_length=500, required=False, allow_blank=True)
    linkUrl = serializers.CharField(source='link_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Carousel
        fields = ['id', 'title', 'subtitle', 'imageUrl', 'linkUrl', 'sortOrder', 'isActive', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'title': {'required': False, 'allow_blank': True},
            'subtitle': {'required': False, 'allow_blank': True, 'allow_null': True},
        }


class CompanyImageSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source='image_url', max_length=500, required=False, allow_blank=True)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = CompanyImage
        fields = ['id', 'title', 'description', 'imageUrl', 'sortOrder', 'isActive', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'title': {'required': False, 'allow_blank': True},
            'description': {'required': False, 'allow_blank': True, 'allow_null': True},
        }
