"""Marketing API routes (mounted under ``/api/``)."""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views
from .models import Policy

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register(r'admin/banners', views.AdminBannerViewSet, basename='admin-banner')
router.register(r'admin/testimonials', views.AdminTestimonialViewSet, basename='admin-testimonial')
router.register(r'admin/blogs', views.AdminBlogViewSet, basename='admin-blog')
router.register(r'admin/coupons', views.AdminCouponViewSet, basename='admin-coupon')
router.register(r'admin/privacypolicy', views.AdminPrivacyPolicyViewSet, basename='admin-privacy-policy')
router.register(r'admin/shippingpolicy', views.AdminShippingPolicyViewSet, basename='admin-shipping-policy')
router.register(r'admin/stitchingpolicy', views.AdminStitchingPolicyViewSet, basename='admin-stitching-policy')
router.register(r'blogs', views.PublicBlogViewSet, basename='blog')

urlpatterns = [
    path('banners/', views.PublicBannerListView.as_view(), name='banner-list'),
    path('testimonials/', views.PublicTestimonialListView.as_view(), name='testimonial-list'),
    path('coupons/validate/', views.validate_coupon, name='coupon-validate'),
    path('aboutus/', views.about_us, name='aboutus'),
    path('admin/aboutus/', views.AdminAboutUsView.as_view(), name='admin-aboutus'),
    path('privacypolicy/', views.PublicPolicyListView.as_view(kind=Policy.KIND_PRIVACY), name='privacy-policy'),
    path('shippingpolicy/', views.PublicPolicyListView.as_view(kind=Policy.KIND_SHIPPING), name='shipping-policy'),
    path('stitchingpolicy/', views.PublicPolicyListView.as_view(kind=Policy.KIND_STITCHING), name='stitching-policy'),
    path('', include(router.urls)),
]
