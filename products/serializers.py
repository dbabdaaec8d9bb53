"""Serializers for the product catalog and categories."""

from rest_framework import serializers

from .models import Category, HeaderCategory, Product, ShowcaseItem


def _image_value_to_url(value, *, request=None):
    """Return a usable URL for an ImageField value.

    Seeded rows may store absolute URLs (e.g. https://picsum.photos/...), for
    which Django's ``.url`` would prefix MEDIA_URL and produce broken paths.
    Absolute URLs are returned as-is; real media files go through ``.url``.
    """

    if not value:
        return None

    raw = str(value)
    if raw.startswith('http://') or raw.startswith('https://'):
        return raw

    url = value.url
    if request is not None:
        return request.build_absolute_uri(url)
    return url


class CategorySerializer(serializers.ModelSerializer):
    """Category with an optional uploaded image (multipart)."""

    isActive = serializers.BooleanField(source='is_active', required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Category
        fields = [
            'id', 'name', 'slug', 'description', 'icon', 'color', 'image',
            'isActive', 'order', 'createdAt', 'updatedAt',
        ]
        extra_kwargs = {'slug': {'required': False}}

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['image'] = _image_value_to_url(instance.image, request=self.context.get('request'))
        return data


class HeaderImageSerializer(serializers.Serializer):
    url = serializers.CharField()
    categoryName = serializers.CharField(required=False, allow_blank=True, default='')


class HeaderCategorySerializer(serializers.ModelSerializer):
    images = serializers.ListField(child=HeaderImageSerializer(), required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = HeaderCategory
        fields = [
            'id', 'name', 'title', 'slug', 'description', 'images', 'icon', 'color',
            'isActive', 'order', 'createdAt', 'updatedAt',
        ]
        extra_kwargs = {'slug': {'required': False}}


class ProductVariationSerializer(serializers.Serializer):
    """One size/colour stock line stored inside ``Product.variations``."""

    size = serializers.CharField(required=False, allow_blank=True, default='')
    color = serializers.CharField(required=False, allow_blank=True, default='')
    stock = serializers.IntegerField(required=False, min_value=0, default=0)
    price_modifier = serializers.FloatField(required=False, default=0)


class RelatedProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'images', 'price']


class ProductSerializer(serializers.ModelSerializer):
    """Product as listed and written by the admin dashboard.

    ``relatedProducts`` is written and listed as a list of product ids.
    """

    name = serializers.CharField(max_length=255, required=False, allow_blank=True)
    category_id = serializers.PrimaryKeyRelatedField(
        source='category',
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    categoryName = serializers.SerializerMethodField()
    oldPrice = serializers.DecimalField(source='old_price', max_digits=10, decimal_places=2, required=False, allow_null=True)
    images = serializers.ListField(child=serializers.CharField(), required=False)
    variations = serializers.ListField(child=ProductVariationSerializer(), required=False)
    relatedProducts = serializers.PrimaryKeyRelatedField(
        source='related_products',
        many=True,
        queryset=Product.objects.all(),
        required=False,
    )
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'category_id', 'categoryName',
            'price', 'oldPrice', 'discount', 'discount_price', 'discount_reason',
            'purchased_price', 'transport_cost', 'other_cost', 'gst', 'total_price', 'rating',
            'images', 'variations', 'relatedProducts',
            'status', 'bestseller', 'trending', 'newarrival', 'instagram_url',
            'createdAt', 'updatedAt',
        ]
        extra_kwargs = {'slug': {'required': False}}

    def get_categoryName(self, obj):
        return obj.category.name if obj.category_id else None

    def validate(self, attrs):
        name = attrs.get('name')
        if self.partial:
            missing = 'name' in attrs and not (name or '').strip()
        else:
            missing = not (name or '').strip()
        if missing:
            raise serializers.ValidationError('Product name is required for slug generation')
        return attrs


class ProductDetailSerializer(ProductSerializer):
    """Single product with ``relatedProducts`` resolved to name, images and price."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['relatedProducts'] = RelatedProductSerializer(instance.related_products.all(), many=True).data
        return data


class ShowcaseVariationSerializer(serializers.Serializer):
    color = serializers.CharField()
    size = serializers.CharField()
    stock = serializers.IntegerField(min_value=0, default=0)
    sku = serializers.CharField(required=False, allow_blank=True)


class ShowcaseItemSerializer(serializers.ModelSerializer):
    """A rail card; the rail itself comes from the URL, never the body."""

    images = serializers.ListField(child=serializers.CharField(), required=False)
    ratings = serializers.DecimalField(max_digits=2, decimal_places=1, min_value=0, max_value=5, required=False)
    variations = serializers.ListField(child=ShowcaseVariationSerializer(), required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = ShowcaseItem
        fields = [
            'id', 'title', 'slug', 'description', 'category', 'images',
            'price', 'mrp', 'discount', 'ratings', 'variations', 'createdAt', 'updatedAt',
        ]
        extra_kwargs = {'slug': {'required': False}}
