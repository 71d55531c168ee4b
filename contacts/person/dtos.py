"""
Data Transfer Objects for Person Domain
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional


@dataclass(frozen=True)
class SearchTerm:
    """
    One parsed search token.

    operator is one of:
    - 'email_equals': some email entry's value equals `value` exactly
    - 'contains': column `field` contains `value`
    - 'any': name contains `value` OR some email equals `value`
    """
    operator: str
    value: str
    field: Optional[str] = None


@dataclass
class MassDeleteResult:
    """Outcome of a mass delete, per identifier"""
    deleted: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)
    failed: List[int] = field(default_factory=list)


@dataclass
class PersonWriteDTO:
    """
    DTO for creating or fully updating a person.

    `provided` names the optional fields present in the request; None means
    every field is set explicitly.
    """
    name: str
    emails: List[dict] = field(default_factory=list)
    contact_numbers: List[Optional[dict]] = field(default_factory=list)
    job_title: Optional[str] = None
    organization_id: Optional[int] = None
    user_id: Optional[int] = None
    attributes: dict = field(default_factory=dict)
    provided: Optional[FrozenSet[str]] = None

    def to_dict(self):
        data = {
            'name': self.name,
            'emails': list(self.emails),
            'contact_numbers': list(self.contact_numbers),
            'attributes': dict(self.attributes),
        }
        for name in ('job_title', 'organization_id', 'user_id'):
            if self.provided is None or name in self.provided:
                data[name] = getattr(self, name)
        return data
