"""Relation checks for people pulled out of the registry."""

from __future__ import annotations

import logging

from profiles.core.exceptions import NotAFriendError
from profiles.models import Person, PersonKind

logger = logging.getLogger(__name__)


def check_relation(person: Person) -> str:
    """Return a friend's relation.

    Raises `NotAFriendError` for any other variant and lets
    `RelationNotDefinedError` from `Friend.check_relation` propagate.
    """

    if person.kind != PersonKind.FRIEND:
        raise NotAFriendError(f"{person.full_name} is {person.who_am_i}, not a friend")
    logger.debug("Checking relation of %s", person.full_name)
    return person.check_relation()  # type: ignore[attr-defined]
