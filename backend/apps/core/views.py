"""
Views for authentication, the auth state snapshot and the gated pages.
"""
import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.shortcuts import render

from drf_spectacular.utils import extend_schema, extend_schema_view

from .access import AuthState
from .decorators import protected_route
from .models import Role, User
from .permissions import role_required
from .serializers import (
    AuthStateSerializer,
    LoginSerializer,
    LogoutSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


class AuthViewSet(viewsets.ViewSet):
    """
    Authentication endpoints backing the client-side auth state.
    """

    def get_permissions(self):
        if self.action in ['register', 'login', 'state']:
            permission_classes = [AllowAny]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    @extend_schema(
        summary="Register a practitioner account",
        request=UserRegistrationSerializer,
        responses={201: UserSerializer},
        tags=['Auth']
    )
    @action(detail=False, methods=['post'])
    def register(self, request):
        """
        Register a new practitioner and sign them in.
        POST /api/v1/auth/register/
        """
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info(f"Registered practitioner {user.id}")

        return Response({
            'user': UserSerializer(user).data,
            'tokens': _token_pair(user),
        }, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Sign in with email and password",
        description="""
        Returns the user and a JWT pair. Clients store the tokens and
        call `/auth/me/` on start-up to rebuild their auth state.
        """,
        request=LoginSerializer,
        tags=['Auth']
    )
    @action(detail=False, methods=['post'])
    def login(self, request):
        """
        POST /api/v1/auth/login/
        """
        serializer = LoginSerializer(
            data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        return Response({
            'user': UserSerializer(user).data,
            'tokens': _token_pair(user),
        })

    @extend_schema(
        summary="Get the signed-in user",
        responses={200: UserSerializer},
        tags=['Auth']
    )
    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        GET /api/v1/auth/me/
        """
        return Response(UserSerializer(request.user).data)

    @extend_schema(
        summary="Sign out by blacklisting the refresh token",
        request=LogoutSerializer,
        tags=['Auth']
    )
    @action(detail=False, methods=['post'])
    def logout(self, request):
        """
        POST /api/v1/auth/logout/
        """
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            RefreshToken(serializer.validated_data['refresh_token']).blacklist()
        except TokenError:
            return Response(
                {'error': 'Invalid token'},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response({'message': 'Logged out successfully'})

    @extend_schema(
        summary="Current auth state snapshot",
        responses={200: AuthStateSerializer},
        tags=['Auth']
    )
    @action(detail=False, methods=['get'])
    def state(self, request):
        """
        GET /api/v1/auth/state/
        """
        snapshot = AuthState.from_request(request)
        return Response(AuthStateSerializer(snapshot.as_dict()).data)


@extend_schema_view(
    list=extend_schema(summary="List users (admin only)", tags=['Users']),
    retrieve=extend_schema(summary="Get a user (admin only)", tags=['Users']),
)
class UserViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Practitioner management for admins.
    """
    queryset = User.objects.order_by('email')
    serializer_class = UserSerializer
    permission_classes = [role_required(Role.ADMIN)]


@protected_route(practitioner_only=True)
def dashboard(request):
    return render(request, 'core/dashboard.html')


@protected_route(required_role=Role.ADMIN)
def admin_dashboard(request):
    return render(request, 'core/admin_dashboard.html', {
        'practitioner_count': User.objects.filter(role=Role.PRACTITIONER).count(),
    })
