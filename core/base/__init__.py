"""
Core Base Module

Provides shared mixins and querysets for CRM models.

Exports:
    Mixins:
        - TimestampMixin: Adds created_at, updated_at
        - OwnedMixin: Adds the owning user (user_id) used for visibility filtering

    QuerySets & Managers:
        - OwnedQuerySet: visible_to(user_ids), ordered_by(sort, order)
        - OwnedManager: Manager for OwnedMixin models

Usage:
    from core.base.models import TimestampMixin, OwnedMixin
    from core.base.managers import OwnedManager

    class Organization(OwnedMixin, TimestampMixin, models.Model):
        name = models.CharField(max_length=255)
        objects = OwnedManager()
"""
