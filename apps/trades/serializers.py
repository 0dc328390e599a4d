from decimal import Decimal

from rest_framework import serializers

from .models import Trade


class TradeSerializer(serializers.ModelSerializer):
    productName = serializers.CharField(source='product_name', max_length=255)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))
    exchangeRate = serializers.DecimalField(source='exchange_rate', max_digits=10, decimal_places=4,
                                            min_value=Decimal('0.0001'))
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=12, decimal_places=2,
                                           min_value=Decimal('0.01'))
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Trade
        fields = ['id', 'productName', 'currency', 'amount', 'exchangeRate', 'totalAmount', 'status',
                  'createdAt', 'updatedAt']

    def validate_currency(self, value):
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError('Currency is required')
        return value
