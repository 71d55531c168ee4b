"""
Person search expressions.

Search tokens are parsed into typed SearchTerm objects and turned into
Q filters:

    "email:a@b.com"         -> some email equals "a@b.com"
    "emails.value:a@b.com"  -> same as above
    "name:jo"               -> name contains "jo"
    "job_title:lead"        -> job title contains "lead"
    "smith"                 -> name contains "smith" OR some email equals "smith"
    "phone:123"             -> unknown field, ignored

Only the first colon separates field and value, so values may contain colons.
Terms are ANDed; each term is applied as its own filter() call so that
"some email equals" is evaluated independently per term.
"""
import logging
from typing import Iterable, List, Optional, Union

from django.db.models import Q

from .dtos import SearchTerm

logger = logging.getLogger(__name__)

OPERATOR_EMAIL_EQUALS = 'email_equals'
OPERATOR_CONTAINS = 'contains'
OPERATOR_ANY = 'any'

EMAIL_FIELDS = ('email', 'emails.value')
CONTAINS_FIELDS = ('name', 'job_title')


def parse_search_term(token: str) -> Optional[SearchTerm]:
    """
    Parse one token.

    Returns:
        SearchTerm, or None when the token names a field that cannot be searched
    """
    token = str(token)

    if ':' not in token:
        return SearchTerm(operator=OPERATOR_ANY, value=token)

    field, value = token.split(':', 1)

    if field in EMAIL_FIELDS:
        return SearchTerm(operator=OPERATOR_EMAIL_EQUALS, value=value, field='emails.value')

    if field in CONTAINS_FIELDS:
        return SearchTerm(operator=OPERATOR_CONTAINS, value=value, field=field)

    logger.debug(f"Ignoring search token on unsupported field '{field}'")
    return None


def parse_search_terms(search: Union[str, Iterable[str], None]) -> List[SearchTerm]:
    """
    Parse a single token or a sequence of tokens, dropping unsupported ones.
    """
    if search is None:
        return []

    if isinstance(search, str):
        search = [search]

    terms = []
    for token in search:
        term = parse_search_term(token)
        if term is not None:
            terms.append(term)
    return terms


def term_to_q(term: SearchTerm) -> Q:
    """Build the Q filter for a single term"""
    if term.operator == OPERATOR_EMAIL_EQUALS:
        return Q(emails__value=term.value)

    if term.operator == OPERATOR_CONTAINS:
        return Q(**{f"{term.field}__icontains": term.value})

    if term.operator == OPERATOR_ANY:
        return Q(name__icontains=term.value) | Q(emails__value=term.value)

    raise ValueError(f"Unknown search operator: {term.operator}")


def apply_search_terms(queryset, terms: Iterable[SearchTerm]):
    """
    Filter a Person queryset by every term (AND).
    """
    joins_emails = False

    for term in terms:
        queryset = queryset.filter(term_to_q(term))
        joins_emails = joins_emails or term.operator in (OPERATOR_EMAIL_EQUALS, OPERATOR_ANY)

    return queryset.distinct() if joins_emails else queryset
