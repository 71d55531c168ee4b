"""
Custom Attribute Models

Business-configurable fields attached to CRM entities without schema changes.

Models:
- Attribute: Definition of a custom field for an entity type (e.g. 'persons')
- AttributeValue: Typed value of an attribute for one entity record
"""
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from core.base.models import TimestampMixin


class Attribute(TimestampMixin, models.Model):
    """
    Custom attribute definition.

    Values are submitted under the attribute's `code` alongside the entity's
    regular fields.
    """
    TYPE_TEXT = 'text'
    TYPE_TEXTAREA = 'textarea'
    TYPE_EMAIL = 'email'
    TYPE_NUMBER = 'number'
    TYPE_BOOLEAN = 'boolean'
    TYPE_DATE = 'date'
    TYPE_CHOICES = [
        (TYPE_TEXT, 'Text'),
        (TYPE_TEXTAREA, 'Textarea'),
        (TYPE_EMAIL, 'Email'),
        (TYPE_NUMBER, 'Number'),
        (TYPE_BOOLEAN, 'Boolean'),
        (TYPE_DATE, 'Date'),
    ]

    code = models.CharField(
        max_length=100,
        help_text="Key used in request payloads (e.g., 'linkedin_url')"
    )
    name = models.CharField(max_length=200, help_text="Display label")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_TEXT)
    entity_type = models.CharField(
        max_length=50,
        help_text="Entity the attribute applies to (e.g., 'persons')"
    )
    is_required = models.BooleanField(default=False)
    is_user_defined = models.BooleanField(
        default=True,
        help_text="System attributes map to real columns and are not stored as values"
    )
    sort_order = models.IntegerField(default=0, help_text="Display order")

    class Meta:
        db_table = 'attributes'
        unique_together = [('code', 'entity_type')]
        ordering = ['entity_type', 'sort_order', 'code']

    def __str__(self):
        return f"{self.entity_type}: {self.code}"


class AttributeValue(models.Model):
    """Value of a custom attribute for one entity record"""
    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.CASCADE,
        related_name='values'
    )

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    entity = GenericForeignKey('content_type', 'object_id')

    # Typed storage; only the column matching attribute.type is used
    text_value = models.TextField(null=True, blank=True)
    number_value = models.DecimalField(max_digits=18, decimal_places=4, null=True, blank=True)
    boolean_value = models.BooleanField(null=True, blank=True)
    date_value = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'attribute_values'
        unique_together = [('attribute', 'content_type', 'object_id')]
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='attr_value_entity_idx'),
        ]

    def __str__(self):
        return f"{self.attribute.code}={self.value}"

    @staticmethod
    def column_for(attribute_type):
        return {
            Attribute.TYPE_NUMBER: 'number_value',
            Attribute.TYPE_BOOLEAN: 'boolean_value',
            Attribute.TYPE_DATE: 'date_value',
        }.get(attribute_type, 'text_value')

    @property
    def value(self):
        return getattr(self, self.column_for(self.attribute.type))

    @value.setter
    def value(self, new_value):
        setattr(self, self.column_for(self.attribute.type), new_value)
