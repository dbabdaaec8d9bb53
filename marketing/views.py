"""Marketing API views.

Banners, testimonials, blogs and coupons, plus the static storefront pages
(about us and the privacy, shipping and stitching policies).
"""

import logging

from django.db import transaction
from rest_framework import generics, status, viewsets
from rest_framework.decorators import api_view
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsContentStaff, IsShopStaff
from core.mixins import AdminResourceMixin

from .models import AboutUs, Banner, Blog, Coupon, Policy, Testimonial
from .serializers import (
    AboutUsSerializer,
    BannerSerializer,
    BlogSerializer,
    CouponSerializer,
    CouponValidateSerializer,
    PolicySerializer,
    TestimonialSerializer,
)

logger = logging.getLogger(__name__)


def _rupees(value):
    if value == value.to_integral_value():
        return str(value.quantize(1))
    return str(value)


class AdminBannerViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    queryset = Banner.objects.all()
    serializer_class = BannerSerializer
    permission_classes = [IsContentStaff]
    pagination_class = None
    not_found_message = 'Banner not found'
    delete_message = 'Banner deleted successfully'


class AdminTestimonialViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    queryset = Testimonial.objects.all()
    serializer_class = TestimonialSerializer
    permission_classes = [IsContentStaff]
    pagination_class = None
    not_found_message = 'Testimonial not found'
    delete_message = 'Testimonial deleted successfully'


class AdminBlogViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    queryset = Blog.objects.all()
    serializer_class = BlogSerializer
    permission_classes = [IsContentStaff]
    pagination_class = None
    not_found_message = 'Blog not found'
    delete_message = 'Blog deleted successfully'


class AdminCouponViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Coupon CRUD. Codes are unique regardless of case."""

    queryset = Coupon.objects.all()
    serializer_class = CouponSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None
    not_found_message = 'Coupon not found'
    delete_message = 'Coupon deleted successfully'


class PublicBannerListView(generics.ListAPIView):
    queryset = Banner.objects.all()
    serializer_class = BannerSerializer
    pagination_class = None


class PublicTestimonialListView(generics.ListAPIView):
    queryset = Testimonial.objects.all()
    serializer_class = TestimonialSerializer
    pagination_class = None


class PublicBlogViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Blog.objects.all()
    serializer_class = BlogSerializer
    pagination_class = None
    lookup_field = 'slug'

    def get_object(self):
        blog = Blog.objects.filter(slug=self.kwargs['slug']).first()
        if blog is None:
            raise NotFound('Blog not found')
        return blog


@api_view(['POST'])
def validate_coupon(request):
    """Check a coupon against an order total and quote the discount.

    Body: ``{code, orderTotal}``. The code is matched case-insensitively among
    active coupons.
    """
    serializer = CouponValidateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    code = serializer.validated_data['code']
    order_total = serializer.validated_data['orderTotal']

    coupon = Coupon.objects.filter(code__iexact=code, is_active=True).first()
    if coupon is None:
        logger.warning('Rejected unknown coupon code %s', code)
        raise NotFound('Invalid coupon code')
    if coupon.is_expired:
        raise ValidationError('Coupon has expired')
    if coupon.min_purchase and order_total < coupon.min_purchase:
        raise ValidationError(f'Minimum purchase of ₹{_rupees(coupon.min_purchase)} required for this coupon')

    discount = coupon.discount_for(order_total)
    logger.info('Coupon %s applied to order total %s (discount %s)', coupon.code, order_total, discount)
    return Response({
        'success': True,
        'coupon': {
            'code': coupon.code,
            'description': coupon.description,
            'discountType': coupon.discount_type,
            'discountValue': coupon.discount_value,
            'discountAmount': discount,
        },
        'message': 'Coupon applied successfully',
    }, status=status.HTTP_200_OK)


# Static pages
class AdminAboutUsView(APIView):
    """
    GET: the page, or ``{}`` before one is saved.
    POST: create or update the single page.
    DELETE: remove it.
    """

    permission_classes = [IsContentStaff]

    def get(self, request):
        page = AboutUs.objects.first()
        return Response(AboutUsSerializer(page).data if page else {})

    def post(self, request):
        with transaction.atomic():
            page = AboutUs.objects.select_for_update().first()
            serializer = AboutUsSerializer(page, data=request.data, partial=page is not None)
            serializer.is_valid(raise_exception=True)
            serializer.save()
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    def delete(self, request):
        deleted, _ = AboutUs.objects.all().delete()
        if not deleted:
            raise NotFound('No About Us content found to delete')
        return Response({'message': 'About Us content deleted successfully'})


@api_view(['GET'])
def about_us(request):
    page = AboutUs.objects.first()
    if page is None:
        raise NotFound('About Us content not found')
    return Response(AboutUsSerializer(page).data)


class AdminPolicyViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Policy CRUD for one ``kind``; subclasses pin the kind."""

    serializer_class = PolicySerializer
    permission_classes = [IsContentStaff]
    pagination_class = None
    not_found_message = 'Policy not found'
    kind = None

    def get_queryset(self):
        return Policy.objects.filter(kind=self.kind)

    def perform_create(self, serializer):
        serializer.save(kind=self.kind)


class AdminPrivacyPolicyViewSet(AdminPolicyViewSet):
    kind = Policy.KIND_PRIVACY


class AdminShippingPolicyViewSet(AdminPolicyViewSet):
    kind = Policy.KIND_SHIPPING


class AdminStitchingPolicyViewSet(AdminPolicyViewSet):
    kind = Policy.KIND_STITCHING


class PublicPolicyListView(generics.ListAPIView):
    """Policies of one kind, most recently edited first."""

    serializer_class = PolicySerializer
    pagination_class = None
    kind = None

    def get_queryset(self):
        return Policy.objects.filter(kind=self.kind)
