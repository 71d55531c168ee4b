"""
Organization App Configuration
"""
from django.apps import AppConfig


class OrganizationConfig(AppConfig):
    """Configuration for the Organization app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'contacts.organization'
    label = 'organization'
    verbose_name = 'Organizations'
