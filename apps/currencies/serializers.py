from decimal import Decimal

from rest_framework import serializers

from .models import ExchangeRate


class ExchangeRateSerializer(serializers.ModelSerializer):
    changePercent = serializers.DecimalField(source='change_percent', max_digits=12, decimal_places=2, read_only=True)
    isPrimary = serializers.BooleanField(source='is_primary', read_only=True)
    apiSource = serializers.CharField(source='api_source', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ExchangeRate
        fields = ['id', 'currency', 'symbol', 'rate', 'change', 'changePercent', 'isPrimary', 'apiSource', 'createdAt', 'updatedAt']


class ExchangeRateWriteSerializer(serializers.Serializer):
    currency = serializers.CharField(max_length=100, required=False)
    symbol = serializers.CharField(max_length=16, required=False)
    rate = serializers.DecimalField(max_digits=20, decimal_places=8, required=False, allow_null=True,
                                    min_value=Decimal('0.00000001'))
    change = serializers.DecimalField(max_digits=20, decimal_places=8, required=False)
    changePercent = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    isPrimary = serializers.BooleanField(required=False)

    def validate_symbol(self, value):
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError('Symbol must not be blank')
        return value

    def validate_currency(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Currency name must not be blank')
        return value


class BaseCurrencySerializer(serializers.Serializer):
    baseCurrency = serializers.CharField(max_length=16)

    def validate_baseCurrency(self, value):
        value = value.strip().upper()
        if not value:
            raise serializers.ValidationError('Base currency is required')
        return value
