"""Database models for storefront orders and their lines."""

import secrets
import string
import time

from django.conf import settings
from django.db import models

from products.models import Product

_ALPHABET = string.ascii_uppercase + string.digits


def _random_code(length):
    return ''.join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_order_id():
    """``ORD<epoch millis>_<6 chars>``, e.g. ``ORD1718000000000_K3J9QX``."""
    return f"ORD{int(time.time() * 1000)}_{_random_code(6)}"


def generate_tracking_number():
    return f"TRK{_random_code(12)}"


class Order(models.Model):
    """A checkout placed by a signed-in shopper or a guest cart session.

    Customer details and the shipping address are kept as submitted so later
    profile edits never rewrite past orders.
    """

    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_PROCESSING = 'processing'
    STATUS_SHIPPED = 'shipped'
    STATUS_DELIVERED = 'delivered'
    STATUS_CANCELLED = 'cancelled'
    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_SHIPPED, 'Shipped'),
        (STATUS_DELIVERED, 'Delivered'),
        (STATUS_CANCELLED, 'Cancelled'),
    )
    CANCELLABLE_STATUSES = (STATUS_PENDING, STATUS_CONFIRMED)

    PAYMENT_PENDING = 'pending'
    PAYMENT_PROCESSING = 'processing'
    PAYMENT_COMPLETED = 'completed'
    PAYMENT_FAILED = 'failed'
    PAYMENT_STATUS_CHOICES = (
        (PAYMENT_PENDING, 'Pending'),
        (PAYMENT_PROCESSING, 'Processing'),
        (PAYMENT_COMPLETED, 'Completed'),
        (PAYMENT_FAILED, 'Failed'),
    )

    METHOD_COD = 'cod'
    METHOD_ONLINE = 'online'
    PAYMENT_METHOD_CHOICES = (
        (METHOD_COD, 'Cash on delivery'),
        (METHOD_ONLINE, 'Online'),
    )

    order_id = models.CharField(max_length=40, unique=True, default=generate_order_id, editable=False)
    owner_key = models.CharField(max_length=64, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
    )

    customer = models.JSONField(default=dict)
    shipping_address = models.JSONField(default=dict, blank=True)

    subtotal = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total = models.DecimalField(max_digits=12, decimal_places=2)
    promo_code = models.CharField(max_length=50, blank=True, default='')

    payment_method = models.CharField(max_length=10, choices=PAYMENT_METHOD_CHOICES, default=METHOD_COD)
    payment_status = models.CharField(max_length=12, choices=PAYMENT_STATUS_CHOICES, default=PAYMENT_PENDING)
    payment_id = models.CharField(max_length=100, blank=True, default='')
    razorpay_order_id = models.CharField(max_length=100, blank=True, default='')

    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default=STATUS_PENDING)
    tracking_number = models.CharField(max_length=120, default=generate_tracking_number)
    estimated_delivery = models.CharField(max_length=50, default='5-7 business days')
    shipped_at = models.DateTimeField(null=True, blank=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['owner_key', '-created_at'], name='order_owner_created_idx'),
            models.Index(fields=['status', '-created_at'], name='order_status_created_idx'),
        ]

    def __str__(self):
        return self.order_id

    @property
    def customer_name(self):
        return f"{self.customer.get('firstName', '')} {self.customer.get('lastName', '')}".strip()

    @property
    def can_cancel(self):
        return self.status in self.CANCELLABLE_STATUSES


class OrderLine(models.Model):
    """Line item inside an order, priced at checkout time."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='lines')
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True, blank=True, related_name='order_lines')
    name = models.CharField(max_length=255)
    image = models.CharField(max_length=500, blank=True, default='')
    size = models.CharField(max_length=20, blank=True, default='')
    color = models.CharField(max_length=50, blank=True, default='')
    price = models.DecimalField(max_digits=10, decimal_places=2)
    quantity = models.PositiveIntegerField(default=1)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.quantity} x {self.name} ({self.order.order_id})"

    @property
    def subtotal(self):
        return self.price * self.quantity
