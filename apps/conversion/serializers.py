from decimal import Decimal

from rest_framework import serializers

from .calculator import SUPPORTED_PAYOUT_CURRENCIES
from .models import ConversionConfig


class PublicConversionConfigSerializer(serializers.ModelSerializer):
    rRate = serializers.DecimalField(source='r_rate', max_digits=10, decimal_places=4)
    serviceFeePercent = serializers.DecimalField(source='service_fee_percent', max_digits=5, decimal_places=4)
    ngnRate = serializers.DecimalField(source='ngn_rate', max_digits=10, decimal_places=4)
    ghcRate = serializers.DecimalField(source='ghc_rate', max_digits=10, decimal_places=4)
    cardCategories = serializers.JSONField(source='card_categories')
    categoryRates = serializers.JSONField(source='category_rates')

    class Meta:
        model = ConversionConfig
        fields = ['rRate', 'serviceFeePercent', 'ngnRate', 'ghcRate', 'cardCategories', 'categoryRates']


class ConversionConfigSerializer(PublicConversionConfigSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta(PublicConversionConfigSerializer.Meta):
        fields = ['id'] + PublicConversionConfigSerializer.Meta.fields + ['createdAt', 'updatedAt']


class ConversionConfigUpdateSerializer(serializers.Serializer):
    rRate = serializers.DecimalField(max_digits=10, decimal_places=4, required=False, min_value=Decimal('0.0001'))
    serviceFeePercent = serializers.DecimalField(max_digits=5, decimal_places=4, required=False,
                                                 min_value=Decimal('0'), max_value=Decimal('1'))
    ngnRate = serializers.DecimalField(max_digits=10, decimal_places=4, required=False, min_value=Decimal('0.0001'))
    ghcRate = serializers.DecimalField(max_digits=10, decimal_places=4, required=False, min_value=Decimal('0.0001'))
    cardCategories = serializers.DictField(child=serializers.ListField(child=serializers.CharField()), required=False)
    categoryRates = serializers.DictField(child=serializers.DictField(child=serializers.DictField()), required=False)

    FIELD_MAP = {
        'rRate': 'r_rate',
        'serviceFeePercent': 'service_fee_percent',
        'ngnRate': 'ngn_rate',
        'ghcRate': 'ghc_rate',
        'cardCategories': 'card_categories',
        'categoryRates': 'category_rates',
    }

    def apply(self, config: ConversionConfig) -> ConversionConfig:
        for key, attr in self.FIELD_MAP.items():
            if key in self.validated_data:
                setattr(config, attr, self.validated_data[key])
        config.save()
        return config


class CalculateRequestSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal('0.01'))
    currency = serializers.ChoiceField(choices=SUPPORTED_PAYOUT_CURRENCIES)
    cardType = serializers.CharField(required=False)
    category = serializers.CharField(required=False)
    rate = serializers.DecimalField(max_digits=14, decimal_places=6, required=False, min_value=Decimal('0.000001'))

    def validate(self, attrs):
        if 'rate' not in attrs and not (attrs.get('cardType') and attrs.get('category')):
            raise serializers.ValidationError('Either rate or cardType and category are required')
        return attrs
