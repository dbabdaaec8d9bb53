"""Serializers for banners, testimonials, blogs and coupons."""

from rest_framework import serializers

from .models import AboutUs, Banner, Blog, Coupon, Policy, Testimonial


class BannerSerializer(serializers.ModelSerializer):
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Banner
        fields = ['id', 'image', 'link', 'createdAt', 'updatedAt']


class TestimonialSerializer(serializers.ModelSerializer):
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, min_value=0, max_value=5, coerce_to_string=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Testimonial
        fields = ['id', 'name', 'image', 'rating', 'review', 'sku', 'createdAt', 'updatedAt']
        extra_kwargs = {'sku': {'required': False}}


class BlogSerializer(serializers.ModelSerializer):
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Blog
        fields = ['id', 'title', 'slug', 'description', 'image', 'content', 'createdAt', 'updatedAt']
        extra_kwargs = {'slug': {'required': False}}


class CouponSerializer(serializers.ModelSerializer):
    """Admin view of a coupon.

    ``code`` is normalised to upper case before the uniqueness check so that
    ``summer10`` and ``SUMMER10`` collide.
    """

    code = serializers.CharField(max_length=50)
    discountType = serializers.ChoiceField(source='discount_type', choices=Coupon.DISCOUNT_TYPE_CHOICES)
    discountValue = serializers.DecimalField(source='discount_value', max_digits=10, decimal_places=2, min_value=0)
    minPurchase = serializers.DecimalField(
        source='min_purchase', max_digits=10, decimal_places=2, required=False, allow_null=True,
    )
    maxDiscount = serializers.DecimalField(
        source='max_discount', max_digits=10, decimal_places=2, required=False, allow_null=True,
    )
    expiresAt = serializers.DateTimeField(source='expires_at', required=False, allow_null=True)
    isActive = serializers.BooleanField(source='is_active', required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Coupon
        fields = [
            'id', 'code', 'slug', 'description', 'discountType', 'discountValue',
            'minPurchase', 'maxDiscount', 'expiresAt', 'isActive', 'createdAt', 'updatedAt',
        ]
        read_only_fields = ['slug']
        extra_kwargs = {'description': {'required': False}}

    def validate(self, attrs):
        if 'code' in attrs:
            code = attrs['code'].strip().upper()
            if not code:
                raise serializers.ValidationError('Coupon code is required')
            taken = Coupon.objects.filter(code=code)
            if self.instance is not None:
                taken = taken.exclude(pk=self.instance.pk)
            if taken.exists():
                raise serializers.ValidationError('Coupon code already exists')
            attrs['code'] = code
        return attrs


class CouponValidateSerializer(serializers.Serializer):
    code = serializers.CharField(required=False, allow_blank=True, default='')
    orderTotal = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)

    def validate(self, attrs):
        attrs['code'] = attrs['code'].strip()
        if not attrs['code']:
            raise serializers.ValidationError('Coupon code is required')
        return attrs


class AboutUsVideoSerializer(serializers.Serializer):
    url = serializers.CharField()
    poster = serializers.CharField()


class AboutUsSerializer(serializers.ModelSerializer):
    videos = serializers.ListField(child=AboutUsVideoSerializer(), required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = AboutUs
        fields = ['id', 'title', 'description', 'videos', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'title': {'required': False},
            'description': {'required': False},
        }


class PolicySerializer(serializers.ModelSerializer):
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Policy
        fields = ['id', 'title', 'description', 'createdAt', 'updatedAt']
