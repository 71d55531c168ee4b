"""
Core Base Managers Module

Provides querysets shared by owned CRM records.
"""
from django.db import models


class OwnedQuerySet(models.QuerySet):
    """
    QuerySet for models using OwnedMixin.

    Methods:
        - visible_to: Restrict to records owned by authorized users
        - ordered_by: Apply a whitelisted sort column and direction
    """

    def visible_to(self, user_ids):
        """
        Restrict to records whose owner is in `user_ids`.

        Args:
            user_ids: Iterable of user ids, or None for no restriction
        """
        if user_ids is None:
            return self
        return self.filter(user_id__in=list(user_ids))

    def ordered_by(self, sort, order='desc', allowed=('id',), default='id'):
        """
        Order by `sort` when it is in `allowed`, falling back to `default`.

        Args:
            sort: Requested column
            order: 'asc' or 'desc' (anything else is treated as 'desc')
            allowed: Sortable columns
            default: Column used when `sort` is not allowed
        """
        column = sort if sort in allowed else default
        prefix = '' if str(order).lower() == 'asc' else '-'
        return self.order_by(f"{prefix}{column}")


OwnedManager = models.Manager.from_queryset(OwnedQuerySet)
