"""Thin client for the Razorpay orders API."""

import logging
import time
from decimal import ROUND_HALF_UP, Decimal

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """The gateway could not be reached or refused the request."""


def to_paise(amount) -> int:
    """Convert a rupee amount to integer paise, rounding half up."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def create_gateway_order(amount, currency='INR', receipt=None) -> dict:
    """Create a payment order at the gateway and return its JSON body.

    Raises ``PaymentGatewayError`` on network errors, timeouts and non-2xx
    answers.
    """
    payload = {
        'amount': to_paise(amount),
        'currency': currency or 'INR',
        'receipt': receipt or f'order_{int(time.time() * 1000)}',
    }
    url = f"{settings.RAZORPAY_API_BASE.rstrip('/')}/v1/orders"
    try:
        response = requests.post(
            url,
            json=payload,
            auth=(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET),
            timeout=settings.RAZORPAY_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        body = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise PaymentGatewayError(f'Gateway order creation failed: {exc}') from exc

    logger.info('Created gateway order %s for %s paise', body.get('id'), payload['amount'])
    return body
