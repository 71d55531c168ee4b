from .person_serializers import (
    PersonEmailSerializer,
    PersonContactNumberSerializer,
    PersonResourceSerializer,
    EmailEntrySerializer,
    ContactNumberEntrySerializer,
    PersonWriteSerializer,
    MassDestroySerializer,
)

__all__ = [
    'PersonEmailSerializer',
    'PersonContactNumberSerializer',
    'PersonResourceSerializer',
    'EmailEntrySerializer',
    'ContactNumberEntrySerializer',
    'PersonWriteSerializer',
    'MassDestroySerializer',
]
