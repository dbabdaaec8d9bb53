"""Catalog API routes (mounted under ``/api/``)."""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register(r'admin/products', views.AdminProductViewSet, basename='admin-product')
router.register(r'admin/categories', views.AdminCategoryViewSet, basename='admin-category')
router.register(r'admin/header-categories', views.AdminHeaderCategoryViewSet, basename='admin-header-category')
router.register(r'admin/bestseller', views.AdminBestsellerViewSet, basename='admin-bestseller')
router.register(r'admin/trending', views.AdminTrendingViewSet, basename='admin-trending')
router.register(r'admin/newarrivals', views.AdminNewArrivalViewSet, basename='admin-newarrival')
router.register(r'admin/shopbycategory', views.AdminShopByCategoryViewSet, basename='admin-shopbycategory')
router.register(r'products', views.PublicProductViewSet, basename='product')
router.register(r'bestseller', views.BestsellerViewSet, basename='bestseller')
router.register(r'trending', views.TrendingViewSet, basename='trending')
router.register(r'newarrivals', views.NewArrivalViewSet, basename='newarrival')
router.register(r'shopbycategory', views.ShopByCategoryViewSet, basename='shopbycategory')

urlpatterns = [
    path('categories/', views.PublicCategoryListView.as_view(), name='category-list'),
    path('category/<str:slug>/', views.category_products, name='category-products'),
    path('header-categories/public/', views.PublicHeaderCategoryListView.as_view(), name='header-category-public'),
    path('header-category/<str:slug>/', views.header_category_detail, name='header-category-detail'),
    path('', include(router.urls)),
]
