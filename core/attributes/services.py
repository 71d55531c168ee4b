"""
Custom Attribute Service

Validates, converts and stores custom attribute values for any entity.

Usage:
    from core.attributes.services import AttributeValueService

    values = AttributeValueService.validate_values('persons', request.data)
    AttributeValueService.save_values(person, 'persons', values)
"""
import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from .models import Attribute, AttributeValue

logger = logging.getLogger(__name__)

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


class AttributeValueService:
    """Service for custom attribute values on any model"""

    @staticmethod
    def get_attributes(entity_type):
        """
        Get the user-defined attributes configured for an entity type.

        Returns:
            QuerySet of Attribute ordered for display
        """
        return Attribute.objects.filter(
            entity_type=entity_type,
            is_user_defined=True
        ).order_by('sort_order', 'code')

    @staticmethod
    def validate_values(entity_type, data):
        """
        Validate submitted attribute values.

        Args:
            entity_type: Entity type the attributes belong to (e.g., 'persons')
            data: Request payload; keys matching attribute codes are attribute values

        Returns:
            dict: {code: converted value} for the attributes present in `data`

        Raises:
            ValidationError: {code: message} for missing required or malformed values
        """
        errors = {}
        values = {}

        for attribute in AttributeValueService.get_attributes(entity_type):
            if attribute.code not in data:
                if attribute.is_required:
                    errors[attribute.code] = f"{attribute.name} is required"
                continue

            try:
                values[attribute.code] = AttributeValueService._validate_and_convert(
                    data[attribute.code], attribute
                )
            except ValidationError as e:
                errors[attribute.code] = e.messages[0]

        if errors:
            raise ValidationError(errors)

        return values

    @staticmethod
    def save_values(entity, entity_type, values):
        """
        Store converted attribute values for an entity.

        Attributes missing from `values` keep their stored value.
        """
        content_type = ContentType.objects.get_for_model(entity)

        for attribute in AttributeValueService.get_attributes(entity_type):
            if attribute.code not in values:
                continue

            attribute_value, _ = AttributeValue.objects.get_or_create(
                attribute=attribute,
                content_type=content_type,
                object_id=entity.pk,
            )
            attribute_value.value = values[attribute.code]
            attribute_value.save()

        logger.debug(f"Saved {len(values)} attribute value(s) for {entity_type} #{entity.pk}")

    @staticmethod
    def get_values(entity):
        """
        Get stored attribute values as {code: value}.
        """
        content_type = ContentType.objects.get_for_model(entity)
        stored = AttributeValue.objects.filter(
            content_type=content_type,
            object_id=entity.pk
        ).select_related('attribute')
        return {value.attribute.code: value.value for value in stored}

    # ===== Private helper methods =====

    @staticmethod
    def _validate_and_convert(value, attribute):
        """
        Validate and convert value based on the attribute type.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == '':
            if attribute.is_required:
                raise ValidationError(f"{attribute.name} is required")
            return None

        if attribute.type == Attribute.TYPE_NUMBER:
            return AttributeValueService._validate_number(value, attribute)
        elif attribute.type == Attribute.TYPE_BOOLEAN:
            return AttributeValueService._validate_boolean(value, attribute)
        elif attribute.type == Attribute.TYPE_DATE:
            return AttributeValueService._validate_date(value, attribute)
        elif attribute.type == Attribute.TYPE_EMAIL:
            return AttributeValueService._validate_email(value, attribute)

        return str(value)

    @staticmethod
    def _validate_number(value, attribute):
        """Validate number field against the precision of the storage column"""
        if isinstance(value, bool):
            raise ValidationError(f"{attribute.name} must be a valid number")
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"{attribute.name} must be a valid number")

        if not value.is_finite():
            raise ValidationError(f"{attribute.name} must be a valid number")

        column = AttributeValue._meta.get_field('number_value')
        max_integer_digits = column.max_digits - column.decimal_places

        _, digits, exponent = value.normalize().as_tuple()
        decimal_places = max(-exponent, 0)
        integer_digits = max(len(digits) + exponent, 0)

        if decimal_places > column.decimal_places:
            raise ValidationError(
                f"{attribute.name} cannot have more than {column.decimal_places} decimal places"
            )
        if integer_digits > max_integer_digits:
            raise ValidationError(
                f"{attribute.name} cannot have more than {max_integer_digits} digits before the decimal point"
            )

        return value

    @staticmethod
    def _validate_email(value, attribute):
        value = str(value)
        try:
            validate_email(value)
        except ValidationError:
            raise ValidationError(f"{attribute.name} must be a valid email address")
        return value

    @staticmethod
    def _validate_boolean(value, attribute):
        if isinstance(value, bool):
            return value
        normalized = str(value).strip().lower()
        if normalized in TRUE_VALUES:
            return True
        if normalized in FALSE_VALUES:
            return False
        raise ValidationError(f"{attribute.name} must be true or false")

    @staticmethod
    def _validate_date(value, attribute):
        if isinstance(value, date):
            return value
        try:
            return datetime.strptime(str(value), '%Y-%m-%d').date()
        except ValueError:
            raise ValidationError(f"{attribute.name} must be a valid date (YYYY-MM-DD)")
