from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
import logging

from .serializers import OperatorLoginSerializer, OperatorSessionSerializer
from .services import (
    authenticate_operator,
    OperatorSession,
    InvalidCredentialsError,
    InactiveAccountError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class LoginResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    session = OperatorSessionSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=OperatorLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Check the operator credential, open the session and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with the operator username and password."""
    serializer = OperatorLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    username = serializer.validated_data['username']

    try:
        user = authenticate_operator(
            username=username,
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError:
        logger.warning('Rejected login attempt for %r', username)
        return Response({
            'error': 'Invalid username or password'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError:
        return Response({
            'error': 'Account is deactivated'
        }, status=status.HTTP_403_FORBIDDEN)

    session = OperatorSession.for_request(request)
    session.sign_in(user.username)

    refresh = RefreshToken.for_user(user)

    return Response({
        'message': 'Login successful',
        'session': OperatorSessionSerializer(session.as_dict()).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="Clear the operator session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Clear the operator session flag and username."""
    OperatorSession.for_request(request).sign_out()
    return Response({
        'message': 'Logout successful'
    })


@extend_schema(
    responses={200: OperatorSessionSerializer},
    description="Report whether the operator session is open.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def current_session(request):
    """Get the current operator session state."""
    session = OperatorSession.for_request(request)
    return Response(OperatorSessionSerializer(session.as_dict()).data)
