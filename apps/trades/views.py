from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.pagination import paginate
from apps.users.permissions import RequireAdminRole
from .models import Trade
from .serializers import TradeSerializer

ADMIN_PERMISSIONS = [IsAuthenticated, RequireAdminRole]


class PublicTradesView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Public"], responses={200: None})
    def get(self, request):
        qs = Trade.objects.filter(status=Trade.Status.COMPLETED).order_by('-created_at')
        return Response(paginate(request, qs, TradeSerializer, key='trades', default_limit=10))


class AdminTradesView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Trades"], responses={200: None})
    def get(self, request):
        qs = Trade.objects.order_by('-created_at')
        return Response(paginate(request, qs, TradeSerializer, key='trades', default_limit=20))

    @extend_schema(tags=["Admin Trades"], request=TradeSerializer, responses=TradeSerializer)
    def post(self, request):
        serializer = TradeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)


class AdminTradeDetailView(APIView):
    permission_classes = ADMIN_PERMISSIONS

    @extend_schema(tags=["Admin Trades"], request=TradeSerializer, responses=TradeSerializer)
    def put(self, request, id: int):
        try:
            trade = Trade.objects.get(id=id)
        except Trade.DoesNotExist:
            raise NotFound('Trade not found')
        serializer = TradeSerializer(trade, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    @extend_schema(tags=["Admin Trades"], responses={200: None})
    def delete(self, request, id: int):
        deleted, _ = Trade.objects.filter(id=id).delete()
        if not deleted:
            raise NotFound('Trade not found')
        return Response({'message': 'Deleted'})
