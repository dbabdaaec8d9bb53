"""Serializers for wholesalers and invoices."""

from django.db import IntegrityError, transaction
from rest_framework import serializers

from .models import Invoice, Wholesaler
from .numbering import next_invoice_number
from .validators import validate_wholesaler

STRIPPED_FIELDS = ('name', 'gst_number', 'area', 'city', 'state', 'email', 'website', 'pincode')


class WholesalerSerializer(serializers.ModelSerializer):
    """Wholesaler payload.

    Required-field, email, pincode and column-length checks all run through
    ``validate_wholesaler``, and only the first violated rule is reported.
    The string fields carry no ``max_length`` of their own.
    """

    name = serializers.CharField(required=False, allow_blank=True)
    area = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    state = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    website = serializers.CharField(required=False, allow_blank=True)
    pincode = serializers.CharField(required=False, allow_blank=True)
    gstNumber = serializers.CharField(source='gst_number', required=False, allow_blank=True)
    contactNumbers = serializers.ListField(source='contact_numbers', child=serializers.CharField(), required=False)
    productsPurchased = serializers.ListField(source='products_purchased', child=serializers.CharField(), required=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    class Meta:
        model = Wholesaler
        fields = [
            'id', 'name', 'gstNumber', 'area', 'city', 'state', 'contactNumbers',
            'email', 'website', 'address', 'pincode', 'productsPurchased',
            'createdAt', 'updatedAt',
        ]

    def validate(self, attrs):
        current = {}
        if self.instance is not None:
            current = {key: getattr(self.instance, key) for key in ('name', 'area', 'city', 'email', 'pincode')}
        errors = validate_wholesaler({**current, **attrs})
        if errors:
            raise serializers.ValidationError(errors[0]['message'])
        for key in STRIPPED_FIELDS:
            if key in attrs:
                attrs[key] = attrs[key].strip()
        return attrs


class InvoiceSerializer(serializers.ModelSerializer):
    """Invoice as listed; the wholesaler is summarised."""

    invoiceNumber = serializers.CharField(source='invoice_number', max_length=50, required=False, allow_blank=True)
    wholesalerId = serializers.PrimaryKeyRelatedField(source='wholesaler', queryset=Wholesaler.objects.all())
    wholesaler = serializers.SerializerMethodField()
    purchaseDate = serializers.DateField(source='purchase_date')
    grossAmount = serializers.DecimalField(source='gross_amount', max_digits=12, decimal_places=2, min_value=0)
    gstPercentage = serializers.DecimalField(source='gst_percentage', max_digits=5, decimal_places=2, min_value=0, required=False)
    otherCost = serializers.DecimalField(source='other_cost', max_digits=12, decimal_places=2, min_value=0, required=False)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    financialYear = serializers.CharField(source='financial_year', max_length=20)
    totalAmount = serializers.DecimalField(source='total_amount', max_digits=12, decimal_places=2, read_only=True)
    autoGenerate = serializers.BooleanField(write_only=True, required=False, default=False)
    createdAt = serializers.ReadOnlyField(source='created_at')
    updatedAt = serializers.ReadOnlyField(source='updated_at')

    wholesaler_fields = ('id', 'name', 'city', 'contactNumbers', 'gstNumber')

    class Meta:
        model = Invoice
        fields = [
            'id', 'invoiceNumber', 'wholesalerId', 'wholesaler', 'purchaseDate',
            'grossAmount', 'gstPercentage', 'otherCost', 'discount', 'description',
            'financialYear', 'totalAmount', 'autoGenerate', 'createdAt', 'updatedAt',
        ]

    def get_wholesaler(self, obj):
        if obj.wholesaler_id is None:
            return None
        data = WholesalerSerializer(obj.wholesaler).data
        if self.wholesaler_fields is None:
            return data
        return {key: data[key] for key in self.wholesaler_fields}

    def validate(self, attrs):
        auto = attrs.get('autoGenerate', False)
        number = (attrs.get('invoice_number') or '').strip()
        if self.instance is None and not auto and not number:
            raise serializers.ValidationError('Invoice number is required')
        if 'invoice_number' in attrs:
            if not number and self.instance is not None:
                raise serializers.ValidationError('Invoice number is required')
            attrs['invoice_number'] = number
            duplicate = Invoice.objects.filter(invoice_number=number)
            if self.instance is not None:
                duplicate = duplicate.exclude(pk=self.instance.pk)
            if number and duplicate.exists():
                raise serializers.ValidationError('Invoice number already exists')
        return attrs

    def create(self, validated_data):
        if validated_data.pop('autoGenerate', False):
            validated_data['invoice_number'] = next_invoice_number(validated_data['financial_year'])
        try:
            with transaction.atomic():
                return super().create(validated_data)
        except IntegrityError:
            raise serializers.ValidationError('Invoice number already exists')

    def update(self, instance, validated_data):
        validated_data.pop('autoGenerate', None)
        try:
            with transaction.atomic():
                return super().update(instance, validated_data)
        except IntegrityError:
            raise serializers.ValidationError('Invoice number already exists')


class InvoiceDetailSerializer(InvoiceSerializer):
    """Single invoice with the full wholesaler record."""

    wholesaler_fields = None
