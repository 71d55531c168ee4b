from django.contrib.contenttypes.fields import GenericRelation
from django.db import models

from contacts.organization.models import Organization
from core.attributes.models import AttributeValue
from core.base.managers import OwnedManager
from core.base.models import OwnedMixin, TimestampMixin


class Person(OwnedMixin, TimestampMixin, models.Model):
    """
    A contact in the CRM (distinct from the authenticated User).

    Emails and contact numbers are ordered child rows, replaced wholesale
    on update. Custom attribute values hang off `attribute_values`.
    """
    name = models.CharField(max_length=255)
    job_title = models.CharField(max_length=255, null=True, blank=True)

    organization = models.ForeignKey(
        Organization,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='persons'
    )

    attribute_values = GenericRelation(AttributeValue, related_query_name='person')

    objects = OwnedManager()

    class Meta:
        db_table = 'persons'
        ordering = ['id']
        indexes = [
            models.Index(fields=['name'], name='person_name_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def email_values(self):
        return [email.value for email in self.emails.all()]


class LabeledValue(models.Model):
    """An ordered {value, label} entry belonging to a person"""
    value = models.CharField(max_length=254)
    label = models.CharField(max_length=100)
    position = models.PositiveIntegerField(default=0, help_text="Order within the person's list")

    class Meta:
        abstract = True
        ordering = ['position', 'id']

    def __str__(self):
        return f"{self.label}: {self.value}"


class PersonEmail(LabeledValue):
    person = models.ForeignKey(Person, on_delete=models.CASCADE, related_name='emails')

    class Meta(LabeledValue.Meta):
        db_table = 'person_emails'
        indexes = [
            models.Index(fields=['value'], name='person_email_value_idx'),
        ]


class PersonContactNumber(LabeledValue):
    person = models.ForeignKey(Person, on_delete=models.CASCADE, related_name='contact_numbers')

    class Meta(LabeledValue.Meta):
        db_table = 'person_contact_numbers'
