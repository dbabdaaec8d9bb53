"""Garment variant API views.

Every kind exposes the same admin resource (list with ``?parentId=``, create,
read, update, delete) plus a nested list/create under its parent product.
"""

import logging

from django.db.models import Count, Sum
from rest_framework import generics, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from accounts.permissions import IsShopStaff
from core.mixins import AdminResourceMixin
from products.models import Product

from . import kinds
from .models import GarmentVariant
from .serializers import GarmentVariantSerializer

logger = logging.getLogger(__name__)


class GarmentVariantViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """CRUD for one variant kind; subclasses only pick the kind."""

    kind = None
    serializer_class = GarmentVariantSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None

    @property
    def not_found_message(self):
        return f'{self.kind.label} not found'

    def get_queryset(self):
        qs = GarmentVariant.objects.filter(kind=self.kind.key).select_related('wholesaler')
        parent_id = self.request.query_params.get('parentId')
        if parent_id:
            if not parent_id.isdigit():
                return qs.none()
            qs = qs.filter(parent_product_id=parent_id)
        return qs.order_by('-updated_at')

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['kind'] = self.kind
        return context

    def perform_create(self, serializer):
        variant = serializer.save()
        logger.info('Created %s %s (product=%s)', self.kind.key, variant.pk, variant.parent_product_id)


class BlouseViewSet(GarmentVariantViewSet):
    kind = kinds.BLOUSE


class OnePcKurtiViewSet(GarmentVariantViewSet):
    kind = kinds.ONE_PC_KURTI


class TwoPcKurtiViewSet(GarmentVariantViewSet):
    kind = kinds.TWO_PC_KURTI


class ThreePcKurtiViewSet(GarmentVariantViewSet):
    kind = kinds.THREE_PC_KURTI


class PetticoatKurtiViewSet(GarmentVariantViewSet):
    kind = kinds.PETTICOAT_KURTI


class ThreePcLehengaViewSet(GarmentVariantViewSet):
    kind = kinds.THREE_PC_LEHENGA


class ProductVariantListCreateView(generics.ListCreateAPIView):
    """``/admin/products/<id>/<resource>/new/``: the parent id comes from the path."""

    kind = None
    serializer_class = GarmentVariantSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None

    def get_product(self):
        if not hasattr(self, '_product'):
            self._product = Product.objects.filter(pk=self.kwargs['product_id']).first()
        if self._product is None:
            raise NotFound('Product not found')
        return self._product

    def get_queryset(self):
        return (
            GarmentVariant.objects.filter(kind=self.kind.key, parent_product=self.get_product())
            .select_related('wholesaler')
            .order_by('-updated_at')
        )

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['kind'] = self.kind
        context['parent_from_path'] = True
        return context

    def create(self, request, *args, **kwargs):
        self.get_product()
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        product = self.get_product()
        variant = serializer.save(parent_product=product)
        logger.info('Created %s %s under product %s', self.kind.key, variant.pk, product.pk)


@api_view(['GET'])
@permission_classes([IsShopStaff])
def product_variant_summary(request, product_id):
    """All variants of a product grouped by kind, with quantity totals."""
    product = Product.objects.filter(pk=product_id).first()
    if product is None:
        return Response({'error': 'Product not found'}, status=status.HTTP_404_NOT_FOUND)
    variants = (
        GarmentVariant.objects.filter(parent_product=product)
        .select_related('wholesaler')
        .order_by('kind', '-updated_at')
    )
    totals = {
        row['kind']: row
        for row in variants.order_by().values('kind').annotate(count=Count('id'), quantity=Sum('quantity'))
    }

    grouped = {}
    for kind in kinds.KINDS.values():
        row = totals.get(kind.key, {})
        grouped[kind.resource] = {
            'label': kind.label,
            'count': row.get('count', 0),
            'quantity': row.get('quantity') or 0,
            'variants': [],
        }
    for variant in variants:
        grouped[kinds.KINDS[variant.kind].resource]['variants'].append(GarmentVariantSerializer(variant).data)

    return Response({
        'productId': product.pk,
        'productName': product.name,
        'kinds': grouped,
        'totalQuantity': sum(group['quantity'] for group in grouped.values()),
    })
