"""
Serializers for Person model
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from contacts.organization.models import Organization
from contacts.organization.serializers import OrganizationSerializer
from contacts.person.dtos import PersonWriteDTO
from contacts.person.models import Person, PersonEmail, PersonContactNumber
from core.attributes.serializers import AttributeValueSerializer
from core.attributes.services import AttributeValueService

PERSON_ENTITY_TYPE = 'persons'


class PersonEmailSerializer(serializers.ModelSerializer):
    class Meta:
        model = PersonEmail
        fields = ['value', 'label']


class PersonContactNumberSerializer(serializers.ModelSerializer):
    class Meta:
        model = PersonContactNumber
        fields = ['value', 'label']


class PersonResourceSerializer(serializers.ModelSerializer):
    """Read serializer: the API-facing view of a person"""
    emails = PersonEmailSerializer(many=True, read_only=True)
    contact_numbers = PersonContactNumberSerializer(many=True, read_only=True)
    organization = OrganizationSerializer(read_only=True)
    attribute_values = AttributeValueSerializer(many=True, read_only=True)
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Person
        fields = [
            'id', 'name', 'job_title',
            'emails', 'contact_numbers',
            'organization', 'attribute_values',
            'user_id', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class EmailEntrySerializer(serializers.Serializer):
    value = serializers.EmailField(max_length=254)
    label = serializers.CharField(max_length=100)


class ContactNumberEntrySerializer(serializers.Serializer):
    value = serializers.CharField(max_length=254)
    label = serializers.CharField(max_length=100)


class PersonWriteSerializer(serializers.Serializer):
    """
    Write serializer for creating or fully updating a person.

    Custom attribute values are read from top-level keys matching the codes
    of the 'persons' attributes and returned under `attributes`.
    """
    name = serializers.CharField(max_length=255)
    job_title = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    emails = EmailEntrySerializer(many=True, allow_empty=False)
    contact_numbers = ContactNumberEntrySerializer(many=True, allow_empty=False)
    organization_id = serializers.IntegerField(required=False, allow_null=True)
    user_id = serializers.IntegerField(required=False, allow_null=True)

    def validate_organization_id(self, value):
        if value is not None and not Organization.objects.filter(pk=value).exists():
            raise serializers.ValidationError("Organization not found")
        return value

    def validate_user_id(self, value):
        if value is not None and not get_user_model().objects.filter(pk=value).exists():
            raise serializers.ValidationError("User not found")
        return value

    def validate(self, attrs):
        attrs['attributes'] = AttributeValueService.validate_values(PERSON_ENTITY_TYPE, self.initial_data)
        return attrs

    def to_dto(self) -> PersonWriteDTO:
        data = self.validated_data.copy()
        data['emails'] = [dict(entry) for entry in data['emails']]
        data['contact_numbers'] = [dict(entry) for entry in data['contact_numbers']]
        return PersonWriteDTO(provided=frozenset(data), **data)


class MassDestroySerializer(serializers.Serializer):
    indices = serializers.ListField(child=serializers.IntegerField(), allow_empty=False)
