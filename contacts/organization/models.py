from django.contrib.contenttypes.fields import GenericRelation
from django.db import models

from core.attributes.models import AttributeValue
from core.base.managers import OwnedManager
from core.base.models import OwnedMixin, TimestampMixin


class Organization(OwnedMixin, TimestampMixin, models.Model):
    """
    Company or institution persons work for.

    Referenced by Person.organization; read-only from the person API.
    """
    name = models.CharField(max_length=255, unique=True)
    address = models.JSONField(
        null=True,
        blank=True,
        help_text="Structured address (address, city, state, country, postcode)"
    )

    attribute_values = GenericRelation(AttributeValue, related_query_name='organization')

    objects = OwnedManager()

    class Meta:
        db_table = 'organizations'
        ordering = ['name']

    def __str__(self):
        return self.name
