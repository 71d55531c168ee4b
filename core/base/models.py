from django.conf import settings
from django.db import models


class TimestampMixin(models.Model):
    """
    Adds timestamps tracking creation and modification.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class OwnedMixin(models.Model):
    """
    Adds the owning user of a record.

    The owner drives record visibility: users with group or individual
    view permission only see records whose owner is in their authorized
    user id set (see core.user_accounts.services.get_authorized_user_ids).
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_owned',
        help_text="User who owns this record"
    )

    class Meta:
        abstract = True
