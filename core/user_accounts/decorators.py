"""
Permission decorators for function-based views.
"""
from functools import wraps

from rest_framework import status

from crm_project.response_formatter import error_response
from .services import user_can_perform_action


def require_permission(permission, action_name=None):
    """
    Decorator to check ACL permissions for function-based views.

    Args:
        permission: The base ACL key (e.g., 'contacts.persons')
        action_name: The action to check. If None, auto-detects from HTTP method

    Usage:
        # Auto-detect action from HTTP method
        @api_view(['GET', 'POST'])
        @require_permission('contacts.persons')
        def person_list(request):
            # GET = 'contacts.persons', POST = 'contacts.persons.create'
            ...

        # Explicit action
        @api_view(['POST'])
        @require_permission('contacts.persons', 'delete')
        def person_mass_destroy(request):
            ...
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return error_response(
                    'Authentication required',
                    status_code=status.HTTP_401_UNAUTHORIZED
                )

            determined_action = action_name or _get_action_from_method(request.method)
            required = f"{permission}.{determined_action}" if determined_action else permission

            allowed, reason = user_can_perform_action(request.user, required)

            if not allowed:
                return error_response(
                    'Permission denied',
                    errors={'permission': [reason], 'required_permission': [required]},
                    status_code=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)

        wrapper.permission = permission
        wrapper.action_name = action_name

        return wrapper
    return decorator


def _get_action_from_method(http_method):
    """Map HTTP method to action suffix; reads need only the base key"""
    method_action_map = {
        'POST': 'create',
        'PUT': 'edit',
        'PATCH': 'edit',
        'DELETE': 'delete',
    }
    return method_action_map.get(http_method, '')
