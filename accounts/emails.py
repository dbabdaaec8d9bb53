"""Transactional emails for the auth flows."""

from django.conf import settings
from django.core.mail import send_mail


def send_password_reset_email(email: str, token: str) -> None:
    link = f"{settings.FRONTEND_URL.rstrip('/')}/reset-password?token={token}"
    send_mail(
        subject='Reset your password',
        message=(
            'We received a request to reset your password.\n\n'
            f'Use this link within {settings.PASSWORD_RESET_TIMEOUT_MINUTES} minutes:\n{link}\n\n'
            'If you did not ask for this, you can ignore this email.'
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )


def send_verification_email(email: str, token: str) -> None:
    link = f"{settings.FRONTEND_URL.rstrip('/')}/verify-email?token={token}"
    send_mail(
        subject='Verify your email address',
        message=f'Welcome! Please confirm your email address:\n{link}',
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[email],
    )
