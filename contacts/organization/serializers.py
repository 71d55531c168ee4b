from rest_framework import serializers

from .models import Organization


class OrganizationSerializer(serializers.ModelSerializer):
    """Read serializer nested inside person resources"""

    class Meta:
        model = Organization
        fields = ['id', 'name', 'address', 'user_id', 'created_at', 'updated_at']
        read_only_fields = fields
