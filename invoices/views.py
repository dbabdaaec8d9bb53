"""Invoices API views: wholesalers, purchase invoices and invoice PDFs."""

from django.http import HttpResponse
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.permissions import IsShopStaff
from core.mixins import AdminResourceMixin

from .models import Invoice, Wholesaler
from .pdf import render_invoice_pdf
from .serializers import InvoiceDetailSerializer, InvoiceSerializer, WholesalerSerializer


class WholesalerViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Wholesaler CRUD, most recently updated first.

    Lists accept ``?search=`` (name, area, city, GST number) and ``?city=``.
    """

    queryset = Wholesaler.objects.order_by('-updated_at')
    serializer_class = WholesalerSerializer
    permission_classes = [IsShopStaff]
    pagination_class = None
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['city', 'state']
    search_fields = ['name', 'area', 'city', 'gst_number']
    ordering_fields = ['updated_at', 'name']
    ordering = ['-updated_at']
    not_found_message = 'Wholesaler not found'
    delete_message = 'Wholesaler deleted successfully'


class InvoiceViewSet(AdminResourceMixin, viewsets.ModelViewSet):
    """Purchase invoice CRUD.

    ``autoGenerate: true`` on create numbers the invoice from its financial
    year; ``/pdf/`` renders the invoice for printing.
    """

    permission_classes = [IsShopStaff]
    pagination_class = None
    not_found_message = 'Invoice not found'
    delete_message = 'Invoice deleted successfully'

    def get_queryset(self):
        qs = Invoice.objects.select_related('wholesaler').order_by('-created_at')
        financial_year = self.request.query_params.get('financialYear')
        if financial_year:
            qs = qs.filter(financial_year=financial_year)
        wholesaler_id = self.request.query_params.get('wholesalerId')
        if wholesaler_id and wholesaler_id.isdigit():
            qs = qs.filter(wholesaler_id=wholesaler_id)
        return qs

    def get_serializer_class(self):
        if self.action == 'list':
            return InvoiceSerializer
        return InvoiceDetailSerializer

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({'invoices': serializer.data})

    @action(detail=True, methods=['get'])
    def pdf(self, request, pk=None):
        invoice = self.get_object()
        response = HttpResponse(render_invoice_pdf(invoice), content_type='application/pdf')
        response['Content-Disposition'] = f'inline; filename="invoice-{invoice.invoice_number}.pdf"'
        return response
