from __future__ import annotations

import logging

from django.db.models import Q
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.permissions import RequireAdminRole
from .models import ExchangeRate, SystemConfig
from .serializers import BaseCurrencySerializer, ExchangeRateSerializer, ExchangeRateWriteSerializer
from .services import (
    ensure_base_currency,
    fetch_rate_for_new_currency,
    get_base_currency,
    set_base_currency,
    update_all_rates,
)

logger = logging.getLogger(__name__)

ADMIN_PERMISSIONS = [IsAuthenticated, RequireAdminRole]


class PublicExchangeRatesView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses=ExchangeRateSerializer(many=True))
    def get(self, request):
        qs = ExchangeRate.objects.order_by('-is_primary', '-updated_at')
        return Response(ExchangeRateSerializer(qs, many=True).data)


class AdminExchangeRatesView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Exchange Rates"], responses=ExchangeRateSerializer(many=True))
    def get(self, request):
        qs = ExchangeRate.objects.order_by('-updated_at')
        return Response(ExchangeRateSerializer(qs, many=True).data)

    @extend_schema(tags=["Admin Exchange Rates"], request=ExchangeRateWriteSerializer, responses=ExchangeRateSerializer)
    def post(self, request):
        payload = ExchangeRateWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        currency = data.get('currency')
        symbol = data.get('symbol')
        if not currency or not symbol:
            raise ValidationError('Currency name and symbol are required')
        if ExchangeRate.objects.filter(Q(currency=currency) | Q(symbol=symbol)).exists():
            raise ValidationError('Currency or symbol already exists')

        rate = data.get('rate')
        change = data.get('change') or 0
        change_percent = data.get('changePercent') or 0
        api_source = None
        if not rate:
            rate = fetch_rate_for_new_currency(symbol)
            if rate is None:
                raise ValidationError(f'Could not fetch a live rate for {symbol}, please enter one manually')
            change = change_percent = 0
            api_source = 'live'
            logger.info('Auto-fetched rate for %s (%s): %s', currency, symbol, rate)

        row = ExchangeRate.objects.create(
            currency=currency,
            symbol=symbol,
            rate=rate,
            change=change,
            change_percent=change_percent,
            is_primary=data.get('isPrimary', False),
            api_source=api_source,
        )
        return Response(ExchangeRateSerializer(row).data, status=status.HTTP_201_CREATED)


class AdminExchangeRateDetailView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    def _get(self, id: int) -> ExchangeRate:
        try:
            return ExchangeRate.objects.get(id=id)
        except ExchangeRate.DoesNotExist:
            raise NotFound('Exchange rate not found')

    @extend_schema(tags=["Admin Exchange Rates"], request=ExchangeRateWriteSerializer, responses=ExchangeRateSerializer)
    def put(self, request, id: int):
        row = self._get(id)
        payload = ExchangeRateWriteSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        currency = data.get('currency')
        if currency and currency != row.currency:
            if ExchangeRate.objects.filter(currency=currency).exclude(id=row.id).exists():
                raise ValidationError('Currency name already exists')
            row.currency = currency
        symbol = data.get('symbol')
        if symbol and symbol != row.symbol:
            if ExchangeRate.objects.filter(symbol=symbol).exclude(id=row.id).exists():
                raise ValidationError('Symbol already exists')
            row.symbol = symbol
        if 'rate' in data:
            if data['rate'] is None:
                raise ValidationError('Rate must be greater than 0')
            row.rate = data['rate']
        if 'change' in data:
            row.change = data['change']
        if 'changePercent' in data:
            row.change_percent = data['changePercent']
        if 'isPrimary' in data:
            row.is_primary = data['isPrimary']
        row.save()
        return Response(ExchangeRateSerializer(row).data)

    @extend_schema(tags=["Admin Exchange Rates"], responses={200: None})
    def delete(self, request, id: int):
        deleted, _ = ExchangeRate.objects.filter(id=id).delete()
        if not deleted:
            raise NotFound('Exchange rate not found')
        return Response({'message': 'Deleted'})


class AdminUpdateRatesView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Exchange Rates"], request=None, responses={200: None})
    def post(self, request):
        result = update_all_rates()
        return Response({
            'message': 'Exchange rates updated',
            'updated': result.updated,
            'skipped': result.skipped,
        })


class AdminBaseCurrencyView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Config"], responses=BaseCurrencySerializer)
    def get(self, request):
        return Response({'baseCurrency': ensure_base_currency()})

    @extend_schema(tags=["Admin Config"], request=BaseCurrencySerializer, responses={200: None})
    def put(self, request):
        payload = BaseCurrencySerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        code = payload.validated_data['baseCurrency']
        if not set_base_currency(code):
            return Response({'baseCurrency': code, 'message': 'Base currency unchanged'})
        return Response({'baseCurrency': code, 'message': 'Base currency updated, all rates recomputed'})


class AdminSystemConfigView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Config"], responses={200: None})
    def get(self, request):
        config = {row.key: row.value for row in SystemConfig.objects.all()}
        config.setdefault(SystemConfig.BASE_CURRENCY_KEY, get_base_currency())
        return Response(config)
