from decimal import Decimal

from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    exchangeRate = serializers.DecimalField(source='exchange_rate', max_digits=10, decimal_places=4)
    minAmount = serializers.DecimalField(source='min_amount', max_digits=10, decimal_places=2)
    maxAmount = serializers.DecimalField(source='max_amount', max_digits=10, decimal_places=2)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'name', 'description', 'category', 'exchangeRate', 'minAmount', 'maxAmount',
                  'status', 'images', 'createdAt', 'updatedAt']


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    category = serializers.CharField(max_length=255)
    exchangeRate = serializers.DecimalField(max_digits=10, decimal_places=4, min_value=Decimal('0.0001'))
    minAmount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    maxAmount = serializers.DecimalField(max_digits=10, decimal_places=2)
    status = serializers.ChoiceField(choices=Product.Status.choices, required=False, default=Product.Status.ACTIVE)

    FIELD_MAP = {
        'name': 'name',
        'description': 'description',
        'category': 'category',
        'exchangeRate': 'exchange_rate',
        'minAmount': 'min_amount',
        'maxAmount': 'max_amount',
        'status': 'status',
    }

    def validate(self, attrs):
        instance = self.instance
        min_amount = attrs.get('minAmount', instance.min_amount if instance else None)
        max_amount = attrs.get('maxAmount', instance.max_amount if instance else None)
        if min_amount is not None and max_amount is not None and max_amount <= min_amount:
            raise serializers.ValidationError({'maxAmount': 'maxAmount must be greater than minAmount'})
        return attrs

    def model_values(self) -> dict:
        return {attr: self.validated_data[key] for key, attr in self.FIELD_MAP.items() if key in self.validated_data}
