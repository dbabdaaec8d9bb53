"""Serializers for the accounts app.

Signup and password payloads validate by hand so that the API answers with the
storefront's own messages ("All fields are required", ...) instead of DRF's
per-field defaults.
"""

import re

from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import UserAddress

User = get_user_model()

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6


def validate_new_password(value):
    if len(value or '') < MIN_PASSWORD_LENGTH:
        raise serializers.ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    return value


class UserSerializer(serializers.ModelSerializer):
    """Public view of a user, as returned by login and ``me``."""

    firstName = serializers.ReadOnlyField(source='first_name')
    lastName = serializers.ReadOnlyField(source='last_name')
    emailVerified = serializers.ReadOnlyField(source='email_verified')

    class Meta:
        model = User
        fields = ['id', 'firstName', 'lastName', 'email', 'role', 'emailVerified']


class SignupSerializer(serializers.Serializer):
    firstName = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    lastName = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    email = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        if not all(attrs.get(key) for key in ('firstName', 'lastName', 'email', 'password')):
            raise serializers.ValidationError('All fields are required')
        if not EMAIL_RE.match(attrs['email']):
            raise serializers.ValidationError('Invalid email format')
        validate_new_password(attrs['password'])
        attrs['email'] = attrs['email'].lower()
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(
            email=validated_data['email'],
            password=validated_data['password'],
            first_name=validated_data['firstName'],
            last_name=validated_data['lastName'],
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        if not attrs.get('email') or not attrs.get('password'):
            raise serializers.ValidationError('Email and password are required')
        attrs['email'] = attrs['email'].strip().lower()
        return attrs


class ResetPasswordSerializer(serializers.Serializer):
    token = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        if not attrs.get('token') or not attrs.get('password'):
            raise serializers.ValidationError('Token and password are required')
        validate_new_password(attrs['password'])
        return attrs


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False)
    newPassword = serializers.CharField(trim_whitespace=False, validators=[validate_new_password])

    def validate_currentPassword(self, value):
        user = self.context['request'].user
        if not user.check_password(value):
            raise serializers.ValidationError('Current password is incorrect')
        return value


class ProfileSerializer(serializers.ModelSerializer):
    """Profile shown on the account page; name and email are editable."""

    firstName = serializers.CharField(source='first_name', required=False, allow_blank=True)
    lastName = serializers.CharField(source='last_name', required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    role = serializers.ReadOnlyField()
    createdAt = serializers.ReadOnlyField(source='date_joined')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = User
        fields = ['id', 'firstName', 'lastName', 'email', 'role', 'createdAt', 'updatedAt']

    def validate(self, attrs):
        if not all((attrs.get(key) or '').strip() for key in ('first_name', 'last_name', 'email')):
            raise serializers.ValidationError('All fields are required')
        email = attrs['email'].strip().lower()
        if len(email) > 254 or not EMAIL_RE.match(email):
            raise serializers.ValidationError('Invalid email format')
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError('Email already exists')
        attrs['first_name'] = attrs['first_name'].strip()
        attrs['last_name'] = attrs['last_name'].strip()
        attrs['email'] = email
        return attrs


class UserAddressSerializer(serializers.ModelSerializer):
    """Address book entry; every field but ``isDefault`` is required."""

    REQUIRED = ('address', 'city', 'state', 'zipcode', 'country', 'country_code', 'mobile_number')

    address = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    state = serializers.CharField(required=False, allow_blank=True)
    zipcode = serializers.CharField(required=False, allow_blank=True)
    country = serializers.CharField(required=False, allow_blank=True)
    countryCode = serializers.CharField(source='country_code', required=False, allow_blank=True)
    mobileNumber = serializers.CharField(source='mobile_number', required=False, allow_blank=True)
    isDefault = serializers.BooleanField(source='is_default', required=False, default=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = UserAddress
        fields = [
            'id', 'address', 'city', 'state', 'zipcode', 'country', 'countryCode',
            'mobileNumber', 'isDefault', 'createdAt', 'updatedAt',
        ]

    def validate(self, attrs):
        if not all(attrs.get(key) for key in self.REQUIRED):
            raise serializers.ValidationError('All fields are required')
        for key in self.REQUIRED:
            limit = UserAddress._meta.get_field(key).max_length
            if len(attrs[key]) > limit:
                raise serializers.ValidationError(f"{key.replace('_', ' ').capitalize()} must be at most {limit} characters")
        return attrs
