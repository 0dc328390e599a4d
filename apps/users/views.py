import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from .permissions import RequireAdminRole

logger = logging.getLogger(__name__)


def _user_payload(user) -> dict:
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'role': user.role,
    }


class LoginView(APIView):
    authentication_classes: list = []
    permission_classes: list = []

    @extend_schema(tags=["Admin Auth"], request=None, responses={200: None})
    def post(self, request):
        data = request.data or {}
        username = data.get('username')
        password = data.get('password')
        if not username or not password:
            return Response({'message': 'Username and password are required'}, status=status.HTTP_400_BAD_REQUEST)

        user = authenticate(request, username=username, password=password)
        if user is None or not RequireAdminRole.allowed(user):
            logger.warning('Rejected admin login for %s', username)
            return Response({'message': 'Invalid username or password'}, status=status.HTTP_401_UNAUTHORIZED)

        refresh = RefreshToken.for_user(user)
        access_token = refresh.access_token
        access_token['role'] = str(user.role)
        access = str(access_token)
        return Response({
            'token': access,
            'access': access,
            'refresh': str(refresh),
            'user': _user_payload(user),
        })
