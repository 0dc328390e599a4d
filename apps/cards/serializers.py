from rest_framework import serializers

from .models import SupportedCard


class SupportedCardSerializer(serializers.ModelSerializer):
    logoUrl = serializers.CharField(source='logo_url', max_length=500, required=False, allow_blank=True, allow_null=True)
    sortOrder = serializers.IntegerField(source='sort_order', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = SupportedCard
        fields = ['id', 'name', 'logoUrl', 'description', 'sortOrder', 'isActive', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True, 'allow_null': True},
        }

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Card name is required')
        return value
