"""Serializers for cart and wishlist rows."""

from rest_framework import serializers

from products.models import Product

from .models import CartItem, WishlistItem


class CartProductSerializer(serializers.ModelSerializer):
    """Snapshot of the product shown next to a cart or wishlist row."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'images', 'price', 'total_price']


class CartItemSerializer(serializers.ModelSerializer):
    productId = serializers.PrimaryKeyRelatedField(source='product', read_only=True)
    product = CartProductSerializer(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    createdAt = serializers.ReadOnlyField(source='created_at')

    class Meta:
        model = CartItem
        fields = ['id', 'productId', 'product', 'quantity', 'subtotal', 'createdAt']


class WishlistItemSerializer(serializers.ModelSerializer):
    productId = serializers.PrimaryKeyRelatedField(source='product', read_only=True)
    product = CartProductSerializer(read_only=True)
    createdAt = serializers.ReadOnlyField(source='created_at')

    class Meta:
        model = WishlistItem
        fields = ['id', 'productId', 'product', 'createdAt']


class AddToCartSerializer(serializers.Serializer):
    productId = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField(min_value=1, default=1)


class UpdateCartItemSerializer(serializers.Serializer):
    itemId = serializers.IntegerField()
    quantity = serializers.IntegerField()

    def validate_quantity(self, value):
        if value < 1:
            raise serializers.ValidationError('Quantity must be at least 1')
        return value


class WishlistAddSerializer(serializers.Serializer):
    productId = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
