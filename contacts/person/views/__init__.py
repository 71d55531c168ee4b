from .person_views import (
    person_list,
    person_detail,
    person_search,
    person_mass_destroy
)

__all__ = [
    'person_list',
    'person_detail',
    'person_search',
    'person_mass_destroy',
]
