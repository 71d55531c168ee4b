"""
Service layer for user visibility and permission checks.
"""
from typing import List, Optional

from .models import CustomUser


def get_authorized_user_ids(user) -> Optional[List[int]]:
    """
    Get the owner ids whose records the user may see.

    Returns:
        None when the user has global visibility (no restriction),
        the ids of every member of the user's groups (the user included)
        for group visibility, otherwise only the user's own id.
    """
    if user.view_permission == CustomUser.VIEW_GLOBAL:
        return None

    if user.view_permission == CustomUser.VIEW_GROUP:
        return get_group_member_ids(user)

    return [user.pk]


def get_group_member_ids(user) -> List[int]:
    """Ids of all users sharing at least one group with `user`, plus `user`."""
    member_ids = set(
        CustomUser.objects.filter(
            groups__in=user.groups.all()
        ).values_list('pk', flat=True)
    )
    member_ids.add(user.pk)
    return sorted(member_ids)


def user_can_perform_action(user, permission: str):
    """
    Check if a user holds an ACL key.

    Args:
        user: The CustomUser instance
        permission: ACL key (e.g., 'contacts.persons.delete')

    Returns:
        Tuple of (allowed: bool, reason: str)
    """
    if not user or not user.is_authenticated:
        return False, "Authentication required"

    if user.role is None:
        return False, "User has no role assigned"

    if user.has_permission(permission):
        return True, "Permission granted"

    return False, f"Role '{user.role.name}' does not grant '{permission}'"
