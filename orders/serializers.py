"""DRF serializers for orders APIs."""

import phonenumbers
from django.conf import settings
from django.db import transaction
from rest_framework import serializers

from products.models import Product

from .models import Order, OrderLine


def normalize_phone(value, region=None):
    """Return ``value`` in E.164 form or raise ``ValidationError``."""
    try:
        number = phonenumbers.parse(value, region or settings.PHONE_DEFAULT_REGION)
    except phonenumbers.NumberParseException:
        raise serializers.ValidationError('Invalid phone number')
    if not phonenumbers.is_valid_number(number):
        raise serializers.ValidationError('Invalid phone number')
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)


class CustomerSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=100)
    lastName = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30)

    def validate_phone(self, value):
        return normalize_phone(value)


class OrderLineSerializer(serializers.ModelSerializer):
    productId = serializers.PrimaryKeyRelatedField(
        source='product',
        queryset=Product.objects.all(),
        required=False,
        allow_null=True,
    )
    quantity = serializers.IntegerField(min_value=1, default=1)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderLine
        fields = ['id', 'productId', 'name', 'image', 'size', 'color', 'price', 'quantity', 'subtotal']
        extra_kwargs = {
            'image': {'required': False},
            'size': {'required': False},
            'color': {'required': False},
        }


class OrderSerializer(serializers.ModelSerializer):
    """Order as shown to its owner and to the back office."""

    orderId = serializers.ReadOnlyField(source='order_id')
    shippingAddress = serializers.JSONField(source='shipping_address', read_only=True)
    items = OrderLineSerializer(source='lines', many=True, read_only=True)
    promoCode = serializers.ReadOnlyField(source='promo_code')
    paymentMethod = serializers.ReadOnlyField(source='payment_method')
    paymentStatus = serializers.ReadOnlyField(source='payment_status')
    paymentId = serializers.ReadOnlyField(source='payment_id')
    razorpayOrderId = serializers.ReadOnlyField(source='razorpay_order_id')
    trackingNumber = serializers.ReadOnlyField(source='tracking_number')
    estimatedDelivery = serializers.ReadOnlyField(source='estimated_delivery')
    shippedAt = serializers.ReadOnlyField(source='shipped_at')
    deliveredAt = serializers.ReadOnlyField(source='delivered_at')
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Order
        fields = [
            'id', 'orderId', 'customer', 'shippingAddress', 'items',
            'subtotal', 'discount', 'total', 'promoCode',
            'paymentMethod', 'paymentStatus', 'paymentId', 'razorpayOrderId',
            'status', 'trackingNumber', 'estimatedDelivery',
            'shippedAt', 'deliveredAt', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    """Checkout payload.

    ``customer``, ``items`` and ``total`` are checked together so a bare
    checkout form gets one message instead of three field errors.
    """

    customer = CustomerSerializer(required=False)
    shippingAddress = serializers.DictField(required=False, default=dict)
    items = OrderLineSerializer(many=True, required=False)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True)
    paymentMethod = serializers.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES, required=False, default=Order.METHOD_COD)
    paymentId = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    razorpayOrderId = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    promoCode = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True, default='')

    def validate(self, attrs):
        if not attrs.get('customer') or not attrs.get('items') or not attrs.get('total'):
            raise serializers.ValidationError('Missing required order data')
        return attrs

    def create(self, validated_data):
        lines = validated_data['items']
        with transaction.atomic():
            order = Order.objects.create(
                owner_key=self.context['owner_key'],
                user=self.context.get('user'),
                customer=validated_data['customer'],
                shipping_address=validated_data['shippingAddress'],
                subtotal=validated_data['subtotal'],
                discount=validated_data['discount'],
                total=validated_data['total'],
                promo_code=(validated_data['promoCode'] or '').strip().upper(),
                payment_method=validated_data['paymentMethod'],
                payment_id=validated_data['paymentId'],
                razorpay_order_id=validated_data['razorpayOrderId'],
            )
            OrderLine.objects.bulk_create([OrderLine(order=order, **line) for line in lines])
        return order


class AdminOrderUpdateSerializer(serializers.ModelSerializer):
    paymentStatus = serializers.ChoiceField(source='payment_status', choices=Order.PAYMENT_STATUS_CHOICES, required=False)
    trackingNumber = serializers.CharField(source='tracking_number', max_length=120, required=False)

    class Meta:
        model = Order
        fields = ['status', 'paymentStatus', 'trackingNumber']
        extra_kwargs = {'status': {'required': False}}


class PaymentOrderSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=1)
    currency = serializers.CharField(max_length=3, required=False, default='INR')
    receipt = serializers.CharField(max_length=40, required=False, allow_blank=True, default='')
