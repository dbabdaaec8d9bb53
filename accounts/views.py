"""Accounts app views.

Contains the JSON auth endpoints used by the storefront and the back-office:
signup, login/logout (bearer token + http-only cookie), ``me``, password
reset, email verification and password change.

Also the signed-in customer's profile and address book under ``/api/user/``.
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login
from django.db import transaction
from django.utils import timezone

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view, authentication_classes, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings as jwt_settings
from rest_framework_simplejwt.tokens import AccessToken

from .emails import send_password_reset_email, send_verification_email
from .models import UserAddress
from .serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    ProfileSerializer,
    ResetPasswordSerializer,
    SignupSerializer,
    UserAddressSerializer,
    UserSerializer,
)
from .tokens import generate_token, hash_token, issue_access_token

logger = logging.getLogger(__name__)

User = get_user_model()

FORGOT_PASSWORD_MESSAGE = "If an account with that email exists, we've sent a password reset link."


def _set_auth_cookie(response, token):
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=not settings.DEBUG,
        samesite='Strict',
        path='/',
    )


@api_view(['POST'])
@permission_classes([AllowAny])
def signup(request):
    """Create a customer account and email a verification link."""
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    if User.objects.filter(email__iexact=serializer.validated_data['email']).exists():
        return Response({'error': 'User already exists'}, status=status.HTTP_409_CONFLICT)

    user = serializer.save()

    raw_token = generate_token()
    user.email_verification_token = hash_token(raw_token)
    user.email_verification_expires = timezone.now() + timedelta(hours=settings.EMAIL_VERIFICATION_TIMEOUT_HOURS)
    user.save(update_fields=['email_verification_token', 'email_verification_expires'])

    try:
        send_verification_email(user.email, raw_token)
    except Exception:
        logger.exception('Could not send verification email to user %s', user.pk)

    logger.info('User %s signed up', user.pk)
    return Response({'message': 'User created successfully.'}, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate(
        request._request,
        email=serializer.validated_data['email'],
        password=serializer.validated_data['password'],
    )
    if user is None:
        logger.warning('Failed login for %s', serializer.validated_data['email'])
        return Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    update_last_login(None, user)
    token = issue_access_token(user)

    response = Response({'message': 'Login successful', 'token': token, 'user': UserSerializer(user).data})
    _set_auth_cookie(response, token)
    return response


@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    response = Response({'message': 'Logged out successfully'})
    response.delete_cookie(settings.AUTH_COOKIE_NAME, path='/', samesite='Strict')
    return response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def me(request):
    """Introspect the bearer token sent in the Authorization header."""
    jwt_auth = JWTAuthentication()
    header = jwt_auth.get_header(request)
    raw_token = jwt_auth.get_raw_token(header) if header is not None else None
    if raw_token is None:
        return Response({'error': 'No token provided'}, status=status.HTTP_401_UNAUTHORIZED)

    try:
        token = AccessToken(raw_token)
    except TokenError:
        return Response({'error': 'Invalid token'}, status=status.HTTP_401_UNAUTHORIZED)

    user = User.objects.filter(pk=token.get(jwt_settings.USER_ID_CLAIM)).first()
    if user is None:
        return Response({'error': 'User not found'}, status=status.HTTP_404_NOT_FOUND)

    return Response({'user': UserSerializer(user).data})


@api_view(['POST'])
@permission_classes([AllowAny])
def forgot_password(request):
    """Start a password reset.

    The answer is the same whether or not the address is registered.
    """
    email = str(request.data.get('email') or '').strip().lower()
    if not email:
        return Response({'error': 'Email is required'}, status=status.HTTP_400_BAD_REQUEST)

    user = User.objects.filter(email__iexact=email).first()
    if user is not None:
        raw_token = generate_token()
        user.password_reset_token = hash_token(raw_token)
        user.password_reset_expires = timezone.now() + timedelta(minutes=settings.PASSWORD_RESET_TIMEOUT_MINUTES)
        user.save(update_fields=['password_reset_token', 'password_reset_expires'])
        try:
            send_password_reset_email(user.email, raw_token)
        except Exception:
            logger.exception('Could not send password reset email to user %s', user.pk)

    return Response({'message': FORGOT_PASSWORD_MESSAGE})


@api_view(['POST'])
@permission_classes([AllowAny])
def reset_password(request):
    serializer = ResetPasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = User.objects.filter(
        password_reset_token=hash_token(serializer.validated_data['token']),
        password_reset_expires__gt=timezone.now(),
    ).first()
    if user is None:
        return Response({'error': 'Invalid or expired reset token'}, status=status.HTTP_400_BAD_REQUEST)

    user.set_password(serializer.validated_data['password'])
    user.password_reset_token = None
    user.password_reset_expires = None
    user.save(update_fields=['password', 'password_reset_token', 'password_reset_expires'])

    logger.info('Password reset for user %s', user.pk)
    return Response({'message': 'Password has been reset successfully'})


@api_view(['POST'])
@permission_classes([AllowAny])
def verify_email(request):
    token = request.data.get('token') or request.query_params.get('token')
    if not token:
        return Response({'error': 'Verification token is required'}, status=status.HTTP_400_BAD_REQUEST)

    user = User.objects.filter(
        email_verification_token=hash_token(token),
        email_verification_expires__gt=timezone.now(),
    ).first()
    if user is None:
        return Response({'error': 'Invalid or expired verification token'}, status=status.HTTP_400_BAD_REQUEST)

    user.email_verified = True
    user.email_verification_token = None
    user.email_verification_expires = None
    user.save(update_fields=['email_verified', 'email_verification_token', 'email_verification_expires'])

    return Response({'message': 'Email verified successfully'})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    serializer = ChangePasswordSerializer(data=request.data, context={'request': request})
    serializer.is_valid(raise_exception=True)

    request.user.set_password(serializer.validated_data['newPassword'])
    request.user.save(update_fields=['password'])
    return Response({'message': 'Password changed successfully'})


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def profile(request):
    """Read or update the signed-in user's name and email."""
    if request.method == 'GET':
        return Response({'user': ProfileSerializer(request.user).data})

    serializer = ProfileSerializer(request.user, data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    logger.info('Profile updated for user %s', user.pk)
    return Response({'message': 'Profile updated successfully', 'user': ProfileSerializer(user).data})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def default_address(request):
    address = UserAddress.objects.filter(user=request.user, is_default=True).first()
    return Response({'address': UserAddressSerializer(address).data if address else None})


class UserAddressViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """The signed-in customer's address book.

    Addresses of other users answer 404. The first address saved becomes the
    default; deleting the default promotes the next one, and the last default
    cannot be deleted.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = UserAddressSerializer
    pagination_class = None
    http_method_names = ['get', 'post', 'put', 'delete']

    def get_queryset(self):
        return UserAddress.objects.filter(user=self.request.user)

    def get_object(self):
        address = self.get_queryset().filter(pk=self.kwargs['pk']).first() if str(self.kwargs['pk']).isdigit() else None
        if address is None:
            raise NotFound('Address not found or does not belong to user')
        return address

    def list(self, request, *args, **kwargs):
        return Response({'addresses': self.get_serializer(self.get_queryset(), many=True).data})

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            first = not self.get_queryset().exists()
            address = serializer.save(user=request.user, is_default=serializer.validated_data['is_default'] or first)
        return Response({'address': self.get_serializer(address).data}, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        address = self.get_object()
        serializer = self.get_serializer(address, data=request.data)
        serializer.is_valid(raise_exception=True)
        address = serializer.save()
        return Response({'address': self.get_serializer(address).data})

    def destroy(self, request, *args, **kwargs):
        address = self.get_object()
        with transaction.atomic():
            if address.is_default:
                successor = self.get_queryset().exclude(pk=address.pk).order_by('-created_at', '-id').first()
                if successor is None:
                    return Response(
                        {'error': 'Cannot delete the only address. Add another address first.'},
                        status=status.HTTP_400_BAD_REQUEST,
                    )
                successor.is_default = True
                successor.save(update_fields=['is_default', 'updated_at'])
            address.delete()
        return Response({'message': 'Address deleted successfully'})

    @action(detail=True, methods=['put'], url_path='default')
    def set_default(self, request, pk=None):
        address = self.get_object()
        address.is_default = True
        address.save(update_fields=['is_default', 'updated_at'])
        return Response({'address': self.get_serializer(address).data})
