from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.permissions import RequireAdminRole
from .calculator import ConversionError, calculate_payout, lookup_category_rate, preview, regional_multiplier
from .models import ConversionConfig
from .serializers import (
    CalculateRequestSerializer,
    ConversionConfigSerializer,
    ConversionConfigUpdateSerializer,
    PublicConversionConfigSerializer,
)

logger = logging.getLogger(__name__)


class PublicConversionConfigView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses=PublicConversionConfigSerializer)
    def get(self, request):
        return Response(PublicConversionConfigSerializer(ConversionConfig.get_solo()).data)


class CalculatePayoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], request=CalculateRequestSerializer, responses={200: None})
    def post(self, request):
        payload = CalculateRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        config = ConversionConfig.get_solo()
        try:
            if 'rate' in data:
                rate, rate_currency = data['rate'], None
            else:
                found = lookup_category_rate(config, data['cardType'], data['category'])
                rate, rate_currency = found.rate, found.currency
            payout = calculate_payout(
                data['amount'], rate, config.service_fee_percent, regional_multiplier(config, data['currency'])
            )
        except ConversionError as exc:
            raise ValidationError(str(exc))
        return Response({
            'amount': data['amount'],
            'currency': data['currency'],
            'categoryRate': rate,
            'categoryCurrency': rate_currency,
            'serviceFeePercent': config.service_fee_percent,
            'payout': payout,
        })


class AdminConversionConfigView(APIView):
    permission_classes = [IsAuthenticated, RequireAdminRole]

    @extend_schema(tags=["Admin Conversion"], responses=ConversionConfigSerializer)
    def get(self, request):
        return Response(ConversionConfigSerializer(ConversionConfig.get_solo()).data)

    @extend_schema(tags=["Admin Conversion"], request=ConversionConfigUpdateSerializer, responses={200: None})
    def put(self, request):
        payload = ConversionConfigUpdateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        config = payload.apply(ConversionConfig.get_solo())
        logger.info('Conversion config updated by %s', request.user)
        return Response({
            'message': 'Conversion config updated',
            'config': ConversionConfigSerializer(config).data,
        })


class AdminConversionPreviewView(APIView):
    permission_classes = [IsAuthenticated, RequireAdminRole]

    @extend_schema(tags=["Admin Conversion"], responses={200: None})
    def get(self, request):
        amount = request.query_params.get('amount') or 100
        try:
            result = preview(ConversionConfig.get_solo(), amount)
        except ConversionError as exc:
            raise ValidationError(str(exc))
        return Response(result)
