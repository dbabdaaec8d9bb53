"""Garment variant API routes (mounted under ``/api/``)."""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import kinds, views

router = DefaultRouter()
router.include_root_view = False
router.register(r'admin/blouses', views.BlouseViewSet, basename='admin-blouse')
router.register(r'admin/one-pc-kurtis', views.OnePcKurtiViewSet, basename='admin-one-pc-kurti')
router.register(r'admin/two-pc-kurtis', views.TwoPcKurtiViewSet, basename='admin-two-pc-kurti')
router.register(r'admin/three-pc-kurtis', views.ThreePcKurtiViewSet, basename='admin-three-pc-kurti')
router.register(r'admin/petticoat-kurtis', views.PetticoatKurtiViewSet, basename='admin-petticoat-kurti')
router.register(r'admin/3pc-lehengas', views.ThreePcLehengaViewSet, basename='admin-3pc-lehenga')

urlpatterns = [
    path(
        f'admin/products/<int:product_id>/{kind.resource}/new/',
        views.ProductVariantListCreateView.as_view(kind=kind),
        name=f'admin-product-{kind.resource}-new',
    )
    for kind in kinds.KINDS.values()
]

urlpatterns += [
    path('admin/products/<int:product_id>/variants/', views.product_variant_summary, name='admin-product-variants'),
    path('', include(router.urls)),
]
