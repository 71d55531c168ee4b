"""
Custom Response Formatter for Standardized API Responses

Success responses follow the format:
{
    "data": {...} | [...],      (omitted when there is no payload)
    "message": "string message" (omitted when empty)
}

Error responses follow the format:
{
    "message": "Error message",
    "errors": {"emails.0.value": ["Enter a valid email address."]} | null
}
"""
from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response


def custom_exception_handler(exc, context):
    """
    Custom exception handler that formats all error responses consistently.

    Django's ObjectDoesNotExist becomes a 404 and Django's ValidationError a 400,
    so store errors that propagate out of the service layer keep their natural
    HTTP representation.
    """
    # Imported lazily: rest_framework.views loads DEFAULT_RENDERER_CLASSES,
    # which points back into this module.
    from rest_framework.views import exception_handler

    if isinstance(exc, ObjectDoesNotExist):
        exc = exceptions.NotFound(str(exc) or 'Not found.')
    elif isinstance(exc, DjangoValidationError):
        detail = exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
        exc = exceptions.ValidationError(detail)

    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def flatten_errors(errors, prefix=''):
    """
    Flatten nested serializer errors into dotted field paths.

    {"emails": [{}, {"value": ["Invalid"]}]} -> {"emails.1.value": ["Invalid"]}
    """
    flat = {}

    if isinstance(errors, dict):
        for key, value in errors.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            flat.update(flatten_errors(value, path))
    elif isinstance(errors, list):
        if all(not isinstance(e, (dict, list)) for e in errors):
            if errors:
                flat[prefix or 'non_field_errors'] = [str(e) for e in errors]
        else:
            for index, value in enumerate(errors):
                path = f"{prefix}.{index}" if prefix else str(index)
                flat.update(flatten_errors(value, path))
    else:
        flat[prefix or 'non_field_errors'] = [str(errors)]

    return flat


def format_error_response(errors, status_code):
    """
    Format error responses into standard format.

    Handles various error formats:
    - {"detail": "message"} -> message only
    - {"field": ["error1", "error2"]} -> message + field errors
    - ["error1", "error2"] -> "error1, error2"
    """
    if isinstance(errors, dict) and set(errors) <= {'detail', 'message', 'errors', 'error'}:
        message = errors.get('message') or errors.get('detail') or errors.get('error') or ''
        return {
            "message": str(message),
            "errors": errors.get('errors'),
        }

    if isinstance(errors, (dict, list)):
        field_errors = flatten_errors(errors)
        message = "; ".join(
            f"{field}: {', '.join(messages)}" if field != 'non_field_errors' else ', '.join(messages)
            for field, messages in field_errors.items()
        )
        return {
            "message": message or 'The given data was invalid.',
            "errors": field_errors if isinstance(errors, dict) else None,
        }

    return {
        "message": str(errors),
        "errors": None,
    }


class StandardizedJSONRenderer(JSONRenderer):
    """
    Custom JSON renderer that wraps all responses in standard format.

    Automatically wraps responses that aren't already formatted.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # 204 No Content responses have no body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and not self.is_already_formatted(data):
            if response.status_code >= 400:
                data = format_error_response(data, response.status_code)
            else:
                data = self.format_success_response(data)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        """Responses carrying a data or message key are already enveloped."""
        return isinstance(data, dict) and ('data' in data or 'message' in data)

    def format_success_response(self, data):
        if isinstance(data, dict) and 'detail' in data:
            return {"message": str(data['detail'])}
        if data is None:
            return {}
        return {"data": data}


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Helper function to create standardized success responses.

    Usage:
        from crm_project.response_formatter import success_response

        return success_response(
            data=PersonResourceSerializer(person).data,
            message="Person created successfully.",
            status_code=status.HTTP_201_CREATED
        )
    """
    body = {}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return Response(body, status=status_code)


def error_response(message, errors=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Helper function to create standardized error responses.

    Usage:
        from crm_project.response_formatter import error_response

        return error_response(
            message="Person could not be deleted.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    """
    return Response({
        "message": message,
        "errors": errors
    }, status=status_code)
