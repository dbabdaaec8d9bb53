"""Database models for shopping carts and wishlists.

Both are keyed by an ``owner_key``: ``user:<id>`` for signed-in shoppers, or
the anonymous ``cart_session_id`` cookie value for guests.
"""

from django.core.validators import MinValueValidator
from django.db import models

from products.models import Product


class CartItem(models.Model):
    owner_key = models.CharField(max_length=64, db_index=True)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='cart_items')
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner_key', 'product'], name='cart_item_owner_product_uniq'),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.product.name}"

    @property
    def subtotal(self):
        return self.product.effective_price * self.quantity


class WishlistItem(models.Model):
    owner_key = models.CharField(max_length=64, db_index=True)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='wishlist_items')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner_key', 'product'], name='wishlist_owner_product_uniq'),
        ]

    def __str__(self):
        return f"{self.owner_key}: {self.product.name}"
