"""In-memory registry of the people created during the current session."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from profiles.core.config import settings
from profiles.core.exceptions import PersonNotFoundError
from profiles.models import FamilyMember, Friend, Person, PersonKind
from profiles.utils.monitoring import MonitoringService, monitoring

logger = logging.getLogger(__name__)


class PersonRegistry:
    """Ordered, insertion-preserving collection of people.

    There is no locking; a single caller is expected to mutate the registry
    at a time.
    """

    def __init__(self, separator: Optional[str] = None, metrics: Optional[MonitoringService] = None) -> None:
        self.separator = settings.NAME_SEPARATOR if separator is None else separator
        self.metrics = metrics or monitoring
        self._people: List[Person] = []

    def add_person(self, person: Person) -> None:
        self._people.append(person)
        self.metrics.record_added(person.kind.value, len(self._people))
        logger.debug("Added %s %s to registry (size=%d)", person.kind.value, person.full_name, len(self._people))

    def get_friend_names(self) -> str:
        return self._names_of(PersonKind.FRIEND)

    def get_family_member_names(self) -> str:
        return self._names_of(PersonKind.FAMILY_MEMBER)

    def clear(self) -> None:
        dropped = len(self._people)
        self._people.clear()
        self.metrics.record_cleared()
        logger.info("Cleared registry (%d people dropped)", dropped)

    @property
    def people(self) -> Tuple[Person, ...]:
        return tuple(self._people)

    def friends(self) -> List[Friend]:
        return [person for person in self._people if person.kind == PersonKind.FRIEND]  # type: ignore[misc]

    def family_members(self) -> List[FamilyMember]:
        return [person for person in self._people if person.kind == PersonKind.FAMILY_MEMBER]  # type: ignore[misc]

    def associates(self) -> List[Person]:
        """Friends and family members in insertion order."""

        return [
            person
            for person in self._people
            if person.kind in (PersonKind.FRIEND, PersonKind.FAMILY_MEMBER)
        ]

    def get(self, index: int) -> Person:
        if index < 0 or index >= len(self._people):
            raise PersonNotFoundError(f"No person at position {index}")
        return self._people[index]

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._people))

    def _names_of(self, kind: PersonKind) -> str:
        return "".join(
            f"{person.full_name}{self.separator}" for person in self._people if person.kind == kind
        )


registry = PersonRegistry()
