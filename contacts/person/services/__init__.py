from .person_service import PersonService, PersonEvents

__all__ = [
    'PersonService',
    'PersonEvents',
]
