"""Cart and wishlist APIs.

Works for signed-in shoppers and guests alike; see ``cart.owners`` for how
the owner of each row is resolved.
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import F
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import CartItem, WishlistItem
from .owners import OwnerKeyMixin
from .serializers import (
    AddToCartSerializer,
    CartItemSerializer,
    UpdateCartItemSerializer,
    WishlistAddSerializer,
    WishlistItemSerializer,
)

logger = logging.getLogger(__name__)


class CartView(OwnerKeyMixin, APIView):
    """
    GET: the cart with item and amount totals.
    POST: add ``{productId, quantity}``, incrementing an existing row.
    PATCH: set ``{itemId, quantity}``.
    DELETE: remove ``?itemId=``.
    """

    def get_items(self):
        return CartItem.objects.filter(owner_key=self.owner_key).select_related('product')

    def get(self, request):
        items = list(self.get_items())
        return Response({
            'success': True,
            'cart': CartItemSerializer(items, many=True).data,
            'totalItems': sum(item.quantity for item in items),
            'totalAmount': sum((item.subtotal for item in items), Decimal('0')),
        })

    def post(self, request):
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.validated_data['productId']
        quantity = serializer.validated_data['quantity']

        with transaction.atomic():
            item, created = CartItem.objects.select_for_update().get_or_create(
                owner_key=self.owner_key,
                product=product,
                defaults={'quantity': quantity},
            )
            if not created:
                CartItem.objects.filter(pk=item.pk).update(quantity=F('quantity') + quantity)
                item.refresh_from_db()

        return Response({
            'success': True,
            'message': 'Added to cart' if created else 'Updated quantity in cart',
            'item': CartItemSerializer(item).data,
        }, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)

    def patch(self, request):
        serializer = UpdateCartItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = self.get_items().filter(pk=serializer.validated_data['itemId']).first()
        if item is None:
            raise NotFound('Item not found in cart')
        item.quantity = serializer.validated_data['quantity']
        item.save(update_fields=['quantity', 'updated_at'])
        return Response({'success': True, 'message': 'Updated cart item', 'item': CartItemSerializer(item).data})

    def delete(self, request):
        item_id = request.query_params.get('itemId') or request.data.get('itemId')
        if not item_id:
            raise ValidationError('Item ID required')
        if not str(item_id).isdigit():
            raise NotFound('Item not found in cart')

        deleted, _ = self.get_items().filter(pk=item_id).delete()
        if not deleted:
            raise NotFound('Item not found in cart')
        return Response({'success': True, 'message': 'Removed from cart'})


class ClearCartView(OwnerKeyMixin, APIView):
    def post(self, request):
        deleted, _ = CartItem.objects.filter(owner_key=self.owner_key).delete()
        logger.info('Cleared %s items from cart %s', deleted, self.owner_key)
        return Response({'success': True, 'message': f'Cleared {deleted} items from cart'})

    delete = post


class WishlistView(OwnerKeyMixin, APIView):
    def get(self, request):
        items = WishlistItem.objects.filter(owner_key=self.owner_key).select_related('product')
        return Response({'success': True, 'wishlist': WishlistItemSerializer(items, many=True).data})

    def post(self, request):
        serializer = WishlistAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item, created = WishlistItem.objects.get_or_create(
            owner_key=self.owner_key,
            product=serializer.validated_data['productId'],
        )
        if not created:
            return Response({'success': False, 'message': 'Item already in wishlist'})
        return Response(
            {'success': True, 'message': 'Added to wishlist', 'item': WishlistItemSerializer(item).data},
            status=status.HTTP_201_CREATED,
        )

    def delete(self, request):
        product_id = request.query_params.get('productId')
        if not product_id:
            raise ValidationError('Product ID required')
        if not product_id.isdigit():
            raise NotFound('Item not found in wishlist')

        deleted, _ = WishlistItem.objects.filter(owner_key=self.owner_key, product_id=product_id).delete()
        if not deleted:
            raise NotFound('Item not found in wishlist')
        return Response({'success': True, 'message': 'Removed from wishlist'})
