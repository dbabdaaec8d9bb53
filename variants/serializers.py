"""Serializers for garment variants.

Each request is validated against the kind's attribute serializer from
``variants.kinds``; keys outside that set (and outside the shared bookkeeping
fields) are dropped, for every kind.
"""

from rest_framework import serializers

from invoices.models import Wholesaler
from products.models import Product

from .kinds import KINDS
from .models import GarmentVariant


class GarmentVariantSerializer(serializers.ModelSerializer):
    """Variant of the kind passed as ``context['kind']``.

    Output flattens the attribute bag next to the shared fields and expands the
    wholesaler to ``{id, name}``.
    """

    financialYear = serializers.CharField(source='financial_year', max_length=20)
    quantity = serializers.IntegerField(min_value=0)
    wholesalerId = serializers.PrimaryKeyRelatedField(source='wholesaler', queryset=Wholesaler.objects.all())
    parentProductId = serializers.PrimaryKeyRelatedField(
        source='parent_product',
        queryset=Product.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = GarmentVariant
        fields = ['id', 'financialYear', 'quantity', 'wholesalerId', 'parentProductId']

    def get_fields(self):
        fields = super().get_fields()
        # Nested routes take the parent from the URL.
        if self.context.get('parent_from_path'):
            fields.pop('parentProductId')
        return fields

    @property
    def kind(self):
        return self.context['kind']

    def to_internal_value(self, data):
        errors = {}
        try:
            validated = super().to_internal_value(data)
        except serializers.ValidationError as exc:
            validated = {}
            errors.update(exc.detail)

        attributes = self.kind.attributes(data=data, partial=self.partial)
        if not attributes.is_valid():
            errors.update(attributes.errors)
        if errors:
            raise serializers.ValidationError(errors)

        validated['attributes'] = dict(attributes.validated_data)
        return validated

    def create(self, validated_data):
        validated_data['kind'] = self.kind.key
        return super().create(validated_data)

    def update(self, instance, validated_data):
        validated_data['attributes'] = {**instance.attributes, **validated_data.get('attributes', {})}
        return super().update(instance, validated_data)

    def to_representation(self, instance):
        kind = KINDS[instance.kind]
        data = {'id': instance.pk, 'kind': instance.kind}
        for name in kind.field_names:
            data[name] = instance.attributes.get(name)
        data.update({
            'financialYear': instance.financial_year,
            'quantity': instance.quantity,
            'wholesalerId': instance.wholesaler_id,
            'wholesaler': (
                {'id': instance.wholesaler.pk, 'name': instance.wholesaler.name}
                if instance.wholesaler_id else None
            ),
            'parentProductId': instance.parent_product_id,
            'createdAt': serializers.DateTimeField().to_representation(instance.created_at),
            'updatedAt': serializers.DateTimeField().to_representation(instance.updated_at),
        })
        return data
