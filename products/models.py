"""Database models for the product catalog and its taxonomy."""

from django.db import models

from core.models import SluggedModel


# Taxonomy
class Category(SluggedModel):
    """Storefront category shown in menus and on the home page."""

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True, default='')
    icon = models.CharField(max_length=255, blank=True, default='')
    color = models.CharField(max_length=20, default='#3B82F6')
    image = models.ImageField(upload_to='categories/', null=True, blank=True)
    is_active = models.BooleanField(default=True)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', '-created_at']
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.name


class HeaderCategory(SluggedModel):
    """Header navigation entry with a gallery of ``{url, categoryName}`` images."""

    name = models.CharField(max_length=255)
    title = models.CharField(max_length=255, blank=True, default='')
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True, default='')
    images = models.JSONField(default=list, blank=True)
    icon = models.CharField(max_length=255, blank=True, default='')
    color = models.CharField(max_length=20, default='#3B82F6')
    is_active = models.BooleanField(default=True)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', '-created_at']
        verbose_name_plural = 'Header categories'

    def __str__(self):
        return self.name


# Catalog
class Product(SluggedModel):
    """Parent product.

    The sellable catalog entry. Stock is tracked on the garment variants
    (see ``variants.GarmentVariant``) that point back to it.
    """

    STATUS_DRAFT = 'draft'
    STATUS_LIVE = 'live'
    STATUS_OFFLINE = 'offline'
    STATUS_CHOICES = (
        (STATUS_DRAFT, 'Draft'),
        (STATUS_LIVE, 'Live'),
        (STATUS_OFFLINE, 'Offline'),
    )

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True, default='')
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, blank=True, related_name='products')

    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    old_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    discount = models.CharField(max_length=50, blank=True, default='')
    discount_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    discount_reason = models.CharField(max_length=255, blank=True, default='')
    purchased_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    transport_cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    other_cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    gst = models.CharField(max_length=20, default='0%')
    total_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    rating = models.DecimalField(max_digits=3, decimal_places=1, null=True, blank=True)

    images = models.JSONField(default=list, blank=True)
    # [{size, color, stock, price_modifier}]
    variations = models.JSONField(default=list, blank=True)
    related_products = models.ManyToManyField('self', symmetrical=False, blank=True, related_name='related_to')

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    bestseller = models.BooleanField(default=False)
    trending = models.BooleanField(default=False)
    newarrival = models.BooleanField(default=False)
    instagram_url = models.URLField(max_length=500, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='product_status_created_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def effective_price(self):
        """Price a shopper pays: ``total_price`` when set, else ``price``."""
        return self.total_price if self.total_price is not None else self.price


# Merchandising
class ShowcaseItem(SluggedModel):
    """Card curated into one of the storefront rails.

    Bestsellers, trending picks, new arrivals and shop-by-category tiles are
    maintained by staff separately from the catalog and looked up by slug.
    """

    slug_source = 'title'

    COLLECTION_BESTSELLER = 'bestseller'
    COLLECTION_TRENDING = 'trending'
    COLLECTION_NEWARRIVAL = 'newarrival'
    COLLECTION_SHOPBYCATEGORY = 'shopbycategory'
    COLLECTION_CHOICES = (
        (COLLECTION_BESTSELLER, 'Bestseller'),
        (COLLECTION_TRENDING, 'Trending'),
        (COLLECTION_NEWARRIVAL, 'New arrival'),
        (COLLECTION_SHOPBYCATEGORY, 'Shop by category'),
    )

    collection = models.CharField(max_length=20, choices=COLLECTION_CHOICES)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    description = models.TextField()
    category = models.CharField(max_length=255)
    images = models.JSONField(default=list, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    mrp = models.DecimalField(max_digits=10, decimal_places=2)
    discount = models.CharField(max_length=50)
    ratings = models.DecimalField(max_digits=2, decimal_places=1, default=0)
    # [{color, size, stock, sku}]
    variations = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['collection', '-created_at'], name='showcase_collection_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.collection})"
