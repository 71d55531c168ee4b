"""
Person Domain Models

Models:
- Person: Contact record (name, job title, organization, owner)
- PersonEmail: Ordered, labelled email addresses of a person
- PersonContactNumber: Ordered, labelled phone numbers of a person
"""

from .person import Person, PersonEmail, PersonContactNumber

__all__ = [
    'Person',
    'PersonEmail',
    'PersonContactNumber',
]
