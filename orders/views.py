"""Orders API views.

Checkout creation, the shopper's own order history and cancellation, the
back-office order desk and payment-gateway order creation.
"""

import logging

from django.conf import settings
from django.db.models import Q
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import api_view
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsShopStaff
from cart.owners import OwnerKeyMixin
from core.mixins import AdminResourceMixin

from .models import Order
from .payments import PaymentGatewayError, create_gateway_order
from .serializers import (
    AdminOrderUpdateSerializer,
    OrderCreateSerializer,
    OrderSerializer,
    PaymentOrderSerializer,
)

logger = logging.getLogger(__name__)


def _order_lookup(value):
    """Match an order by its public ``orderId`` or, for digits, its primary key."""
    value = str(value)
    query = Q(order_id=value)
    if value.isdigit():
        query |= Q(pk=int(value))
    return query


class OwnerOrdersMixin(OwnerKeyMixin):
    def get_orders(self):
        return Order.objects.filter(owner_key=self.owner_key).prefetch_related('lines')

    def get_order(self, order_id):
        order = self.get_orders().filter(_order_lookup(order_id)).first()
        if order is None:
            raise NotFound('Order not found')
        return order


class OrderCreateView(OwnerKeyMixin, APIView):
    """Place an order; it always starts as ``pending`` awaiting confirmation."""

    def post(self, request):
        user = request.user if request.user.is_authenticated else None
        serializer = OrderCreateSerializer(data=request.data, context={'owner_key': self.owner_key, 'user': user})
        serializer.is_valid(raise_exception=True)
        order = serializer.save()
        logger.info('Order %s created for %s (total %s)', order.order_id, self.owner_key, order.total)
        return Response({
            'success': True,
            'order': OrderSerializer(order).data,
            'message': 'Order created successfully',
        }, status=status.HTTP_201_CREATED)


class OrderListView(OwnerOrdersMixin, APIView):
    def get(self, request):
        return Response({'success': True, 'orders': OrderSerializer(self.get_orders(), many=True).data})


class OrderDetailView(OwnerOrdersMixin, APIView):
    def get(self, request, order_id):
        return Response({'success': True, 'order': OrderSerializer(self.get_order(order_id)).data})


class OrderCancelView(OwnerOrdersMixin, APIView):
    """Cancel one of the caller's orders while it is still pending or confirmed."""

    def post(self, request):
        order_id = request.data.get('orderId')
        if not order_id:
            raise ValidationError('Order ID is required')

        order = self.get_order(order_id)
        if not order.can_cancel:
            raise ValidationError(
                f'Cannot cancel order with status: {order.status}. '
                'Only pending and confirmed orders can be cancelled.'
            )

        order.status = Order.STATUS_CANCELLED
        order.save(update_fields=['status', 'updated_at'])
        logger.info('Order %s cancelled by its owner', order.order_id)
        return Response({
            'success': True,
            'order': OrderSerializer(order).data,
            'message': 'Order cancelled successfully',
        })


class AdminOrderViewSet(
    AdminResourceMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Back-office order desk.

    Orders are addressed by ``orderId`` or numeric id. Updates accept
    ``status``, ``paymentStatus`` and ``trackingNumber`` only.
    """

    queryset = Order.objects.prefetch_related('lines')
    serializer_class = OrderSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['status', 'payment_status', 'payment_method']
    search_fields = ['order_id', 'tracking_number', 'promo_code']
    ordering_fields = ['created_at', 'total']
    ordering = ['-created_at']
    lookup_value_regex = '[^/]+'
    not_found_message = 'Order not found'
    delete_message = 'Order deleted successfully'

    def get_object(self):
        order = self.get_queryset().filter(_order_lookup(self.kwargs[self.lookup_field])).first()
        if order is None:
            raise NotFound(self.not_found_message)
        self.check_object_permissions(self.request, order)
        return order

    def list(self, request, *args, **kwargs):
        orders = self.filter_queryset(self.get_queryset())
        return Response({'success': True, 'orders': OrderSerializer(orders, many=True).data})

    def retrieve(self, request, *args, **kwargs):
        return Response({'success': True, 'order': OrderSerializer(self.get_object()).data})

    def update(self, request, *args, **kwargs):
        order = self.get_object()
        serializer = AdminOrderUpdateSerializer(order, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info('Order %s updated by %s: %s', order.order_id, request.user, dict(serializer.validated_data))
        return Response({
            'success': True,
            'order': OrderSerializer(order).data,
            'message': 'Order updated successfully',
        })


@api_view(['POST'])
def create_payment_order(request):
    """Open a payment order at the gateway for the checkout ``amount`` in rupees."""
    serializer = PaymentOrderSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        gateway_order = create_gateway_order(data['amount'], data['currency'], data['receipt'])
    except PaymentGatewayError:
        logger.exception('Payment order creation failed')
        return Response(
            {'success': False, 'error': 'Failed to create order'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response({
        'success': True,
        'order': {
            'id': gateway_order.get('id'),
            'amount': gateway_order.get('amount'),
            'currency': gateway_order.get('currency'),
        },
        'razorpayKeyId': settings.RAZORPAY_PUBLIC_KEY_ID,
    })
