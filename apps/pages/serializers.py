from rest_framework import serializers

from .models import Content, SocialButton


class ContentSerializer(serializers.ModelSerializer):
    heroTitle = serializers.CharField(source='hero_title', required=False, allow_blank=True, allow_null=True)
    heroSubtitle = serializers.CharField(source='hero_subtitle', required=False, allow_blank=True, allow_null=True)
    processSteps = serializers.ListField(source='process_steps', child=serializers.DictField(), required=False, allow_null=True)
    securityFeatures = serializers.ListField(source='security_features', child=serializers.DictField(), required=False, allow_null=True)
    faqs = serializers.ListField(child=serializers.DictField(), required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Content
        fields = ['id', 'heroTitle', 'heroSubtitle', 'processSteps', 'securityFeatures', 'faqs', 'createdAt', 'updatedAt']
        read_only_fields = ['id']


class SocialButtonSerializer(serializers.ModelSerializer):
    iconColor = serializers.CharField(source='icon_color', max_length=100, required=False, allow_blank=True, allow_null=True)
    bgColor = serializers.CharField(source='bg_color', max_length=200, required=False, allow_blank=True, allow_null=True)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = SocialButton
        fields = ['id', 'type', 'label', 'url', 'iconColor', 'bgColor', 'sortOrder', 'isActive', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'url': {'required': False, 'allow_blank': True, 'allow_null': True},
        }


class SocialButtonBatchItemSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
    sortOrder = serializers.IntegerField(required=False)
    isActive = serializers.BooleanField(required=False)
    url = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    label = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)

    FIELD_MAP = {'sortOrder': 'sort_order', 'isActive': 'is_active', 'url': 'url', 'label': 'label'}

    def changes(self, item: dict) -> dict:
        out = {attr: item[key] for key, attr in self.FIELD_MAP.items() if key in item}
        if 'url' in out:
            out['url'] = out['url'] or None
        if 'label' in out:
            out['label'] = out['label'] or ''
        return out


class SocialButtonBatchSerializer(serializers.Serializer):
    buttons = serializers.ListField(child=SocialButtonBatchItemSerializer(), allow_empty=False)
