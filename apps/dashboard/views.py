from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.trades.serializers import TradeSerializer
from apps.users.permissions import RequireAdminRole
from .services import collect_stats


class AdminStatsView(APIView):
    permission_classes = [IsAuthenticated, RequireAdminRole]

    @extend_schema(tags=["Admin Dashboard"], responses={200: None})
    def get(self, request):
        stats = collect_stats()
        stats['recentTrades'] = TradeSerializer(stats['recentTrades'], many=True).data
        return Response(stats)
