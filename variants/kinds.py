"""The six garment variant kinds and their attribute schemas.

Each kind stores its manufacturing attributes in ``GarmentVariant.attributes``;
the serializer below is the only place that decides which keys a kind accepts.
"""

from dataclasses import dataclass

from rest_framework import serializers


class BlouseAttributes(serializers.Serializer):
    fabricType = serializers.CharField()
    workAndPrint = serializers.CharField()
    bustSize = serializers.CharField()
    blouseLength = serializers.CharField()
    sleeveLength = serializers.CharField()
    blouseManufacturer = serializers.CharField()


class OnePcKurtiAttributes(serializers.Serializer):
    kurtiFabricType = serializers.CharField()
    work = serializers.CharField()
    bustSize = serializers.CharField()
    kurtiLength = serializers.CharField()
    sleeveLength = serializers.CharField()
    kurtiManufacturer = serializers.CharField()


class TwoPcKurtiAttributes(serializers.Serializer):
    kurtiFabricType = serializers.CharField()
    pattern = serializers.CharField()
    work = serializers.CharField()
    bustSize = serializers.CharField()
    kurtiLength = serializers.CharField()
    sleeveLength = serializers.CharField()
    pantLength = serializers.CharField()
    pantWaistSize = serializers.CharField()
    pantHipSize = serializers.CharField()
    stretchable = serializers.BooleanField(default=False)
    kurtiManufacturer = serializers.CharField()


class ThreePcKurtiAttributes(TwoPcKurtiAttributes):
    dupattaLength = serializers.CharField()
    dupattaWidth = serializers.CharField()


class PetticoatKurtiAttributes(serializers.Serializer):
    petticoatFabricType = serializers.CharField()
    work = serializers.CharField()
    waistSize = serializers.CharField()
    petticoatLength = serializers.CharField()
    manufacturer = serializers.CharField()


class ThreePcLehengaAttributes(serializers.Serializer):
    designCode = serializers.CharField()
    designName = serializers.CharField()
    lehngaType = serializers.CharField()
    blouseStitching = serializers.CharField()
    skirtStitching = serializers.CharField()
    fabricType = serializers.CharField()
    blouseFabric = serializers.CharField()
    skirtFabric = serializers.CharField()
    dupattaFabric = serializers.CharField()
    workAndPrint = serializers.CharField()
    lehengaManufacturer = serializers.CharField()
    hasKenken = serializers.BooleanField(default=False)


@dataclass(frozen=True)
class VariantKind:
    key: str
    label: str
    resource: str
    attributes: type

    @property
    def field_names(self):
        return list(self.attributes().fields)


BLOUSE = VariantKind('blouse', 'Blouse', 'blouses', BlouseAttributes)
ONE_PC_KURTI = VariantKind('one_pc_kurti', 'One piece kurti', 'one-pc-kurtis', OnePcKurtiAttributes)
TWO_PC_KURTI = VariantKind('two_pc_kurti', 'Two piece kurti', 'two-pc-kurtis', TwoPcKurtiAttributes)
THREE_PC_KURTI = VariantKind('three_pc_kurti', 'Three piece kurti', 'three-pc-kurtis', ThreePcKurtiAttributes)
PETTICOAT_KURTI = VariantKind('petticoat_kurti', 'Petticoat kurti', 'petticoat-kurtis', PetticoatKurtiAttributes)
THREE_PC_LEHENGA = VariantKind('three_pc_lehenga', 'Three piece lehenga', '3pc-lehengas', ThreePcLehengaAttributes)

KINDS = {
    kind.key: kind
    for kind in (BLOUSE, ONE_PC_KURTI, TWO_PC_KURTI, THREE_PC_KURTI, PETTICOAT_KURTI, THREE_PC_LEHENGA)
}

KIND_CHOICES = [(kind.key, kind.label) for kind in KINDS.values()]
