"""Products API views.

Admin CRUD for products, categories and header categories, plus the public
read-only storefront mirrors (live products, active categories, slug lookups)
and the curated showcase rails.
"""

import math

from rest_framework import generics, status, viewsets
from rest_framework.decorators import api_view
from rest_framework.pagination import PageNumberPagination
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from accounts.permissions import IsShopStaff
from core.mixins import AdminResourceMixin

from .models import Category, HeaderCategory, Product, ShowcaseItem
from .serializers import (
    CategorySerializer,
    HeaderCategorySerializer,
    ProductDetailSerializer,
    ProductSerializer,
    ShowcaseItemSerializer,
)


class StandardResultsSetPagination(PageNumberPagination):
    """Default pagination used by most API endpoints."""
    page_size = 20
    page_size_query_param = 'per_page'
    max_page_size = 100


class ProductPagination(StandardResultsSetPagination):
    """Wraps a page as ``{products, meta}`` the way the storefront reads it."""

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response({
            'products': data,
            'meta': {
                'totalProducts': paginator.count,
                'totalPages': math.ceil(paginator.count / paginator.per_page),
                'currentPage': self.page.number,
                'perPage': paginator.per_page,
            },
        })


PRODUCT_SORTS = {
    'lowToHigh': ('price',),
    'highToLow': ('-price',),
    'rating': ('-rating',),
}


PRODUCT_FLAGS = ('bestseller', 'trending', 'newarrival')


def _filter_and_sort_products(queryset, params):
    name = params.get('name')
    if name:
        queryset = queryset.filter(name__icontains=name)
    for flag in PRODUCT_FLAGS:
        if params.get(flag) in ('true', '1'):
            queryset = queryset.filter(**{flag: True})
    return queryset.order_by(*PRODUCT_SORTS.get(params.get('sortBy'), ('-created_at',)))


class AdminProductViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Back-office product CRUD.

    List accepts ``name`` (substring search), the ``bestseller``, ``trending``
    and ``newarrival`` flags, ``page``, ``per_page`` and ``sortBy``
    (lowToHigh, highToLow, rating; newest first otherwise).
    """

    permission_classes = [IsShopStaff]
    pagination_class = ProductPagination
    not_found_message = 'Product not found'
    delete_message = 'Product deleted successfully'

    def get_queryset(self):
        qs = Product.objects.select_related('category').prefetch_related('related_products')
        if self.action == 'list':
            qs = _filter_and_sort_products(qs, self.request.query_params)
        return qs

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductSerializer
        return ProductDetailSerializer


class PublicProductViewSet(viewsets.ReadOnlyModelViewSet):
    """Storefront catalog.

    The list shows live products only. A slug lookup finds any product that
    has not been taken offline, so a link shared before launch keeps working.
    """

    serializer_class = ProductSerializer
    pagination_class = ProductPagination
    lookup_field = 'slug'

    def get_queryset(self):
        qs = Product.objects.filter(status=Product.STATUS_LIVE).select_related('category')
        return _filter_and_sort_products(qs, self.request.query_params)

    def retrieve(self, request, *args, **kwargs):
        product = (
            Product.objects.filter(slug=kwargs['slug'])
            .exclude(status=Product.STATUS_OFFLINE)
            .select_related('category')
            .prefetch_related('related_products')
            .first()
        )
        if product is None:
            return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductDetailSerializer(product, context=self.get_serializer_context()).data)


# Categories
class AdminCategoryViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Category CRUD; accepts multipart uploads for ``image``."""

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsShopStaff]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    pagination_class = None
    not_found_message = 'Category not found'
    delete_message = 'Category deleted successfully'


class PublicCategoryListView(generics.ListAPIView):
    queryset = Category.objects.filter(is_active=True)
    serializer_class = CategorySerializer
    pagination_class = None


@api_view(['GET'])
def category_products(request, slug):
    """Every product filed under the category with ``slug``, newest first."""
    category = Category.objects.filter(slug=slug).first()
    if category is None:
        return Response({'error': 'Category not found'}, status=status.HTTP_404_NOT_FOUND)

    products = (
        Product.objects.filter(category=category)
        .select_related('category')
        .order_by('-created_at', '-id')
    )
    return Response({
        'categoryName': category.name,
        'products': ProductSerializer(products, many=True, context={'request': request}).data,
    })


class AdminHeaderCategoryViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    queryset = HeaderCategory.objects.all()
    serializer_class = HeaderCategorySerializer
    permission_classes = [IsShopStaff]
    pagination_class = None
    not_found_message = 'Header category not found'
    delete_message = 'Header category deleted successfully'


class PublicHeaderCategoryListView(generics.ListAPIView):
    queryset = HeaderCategory.objects.filter(is_active=True).order_by('order', '-created_at')
    serializer_class = HeaderCategorySerializer
    pagination_class = None


@api_view(['GET'])
def header_category_detail(request, slug):
    category = HeaderCategory.objects.filter(slug=slug, is_active=True).first()
    if category is None:
        return Response({'error': 'Header category not found or inactive'}, status=status.HTTP_404_NOT_FOUND)
    return Response({'category': HeaderCategorySerializer(category).data})


# Showcase rails
class AdminShowcaseViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Staff CRUD for one rail; subclasses pin ``collection``."""

    serializer_class = ShowcaseItemSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None
    not_found_message = 'Product not found'
    delete_message = 'Product deleted successfully'
    collection = None

    def get_queryset(self):
        return ShowcaseItem.objects.filter(collection=self.collection)

    def perform_create(self, serializer):
        serializer.save(collection=self.collection)


class PublicShowcaseViewSet(AdminResourceMixin, viewsets.ReadOnlyModelViewSet):
    """Storefront view of one rail, newest first, with ``/{slug}/`` lookups."""

    serializer_class = ShowcaseItemSerializer
    pagination_class = None
    lookup_field = 'slug'
    not_found_message = 'Product not found'
    collection = None

    def get_queryset(self):
        return ShowcaseItem.objects.filter(collection=self.collection)


class AdminBestsellerViewSet(AdminShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_BESTSELLER


class AdminTrendingViewSet(AdminShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_TRENDING


class AdminNewArrivalViewSet(AdminShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_NEWARRIVAL


class AdminShopByCategoryViewSet(AdminShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_SHOPBYCATEGORY


class BestsellerViewSet(PublicShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_BESTSELLER


class TrendingViewSet(PublicShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_TRENDING


class NewArrivalViewSet(PublicShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_NEWARRIVAL


class ShopByCategoryViewSet(PublicShowcaseViewSet):
    collection = ShowcaseItem.COLLECTION_SHOPBYCATEGORY
