from decimal import Decimal

from rest_framework import serializers

from .models import AttributeValue


class AttributeValueSerializer(serializers.ModelSerializer):
    """Read serializer for a stored attribute value"""
    code = serializers.CharField(source='attribute.code', read_only=True)
    name = serializers.CharField(source='attribute.name', read_only=True)
    type = serializers.CharField(source='attribute.type', read_only=True)
    value = serializers.SerializerMethodField()

    class Meta:
        model = AttributeValue
        fields = ['id', 'code', 'name', 'type', 'value']
        read_only_fields = fields

    def get_value(self, obj):
        value = obj.value
        if value is None or isinstance(value, (bool, str)):
            return value
        if isinstance(value, Decimal):
            return format(value.normalize(), 'f')
        return value.isoformat()
