"""Build people from the plain strings a profile form collects."""

from __future__ import annotations

from typing import Dict, Optional, Type

from profiles.core.exceptions import InvalidPersonError
from profiles.models import FamilyMember, Friend, Person, PersonKind, User
from profiles.utils.validators import optional_text

_VARIANTS: Dict[PersonKind, Type[Person]] = {
    PersonKind.USER: User,
    PersonKind.FRIEND: Friend,
    PersonKind.FAMILY_MEMBER: FamilyMember,
}


def build_person(
    kind: PersonKind | str,
    name: str,
    surname: str,
    birth_date: str,
    gender: str,
    relation: Optional[str] = None,
    profession: Optional[str] = None,
) -> Person:
    """Construct the variant named by `kind`.

    Empty `relation` / `profession` text becomes `None`. Supplying either one
    to a kind that has no such field is an `InvalidPersonError`.
    """

    try:
        kind = PersonKind(kind)
    except ValueError as exc:
        raise InvalidPersonError(f"Unknown person kind: {kind!r}") from exc

    relation = optional_text(relation)
    profession = optional_text(profession)
    if relation is not None and kind != PersonKind.FRIEND:
        raise InvalidPersonError("Only friends have a relation")
    if profession is not None and kind != PersonKind.FAMILY_MEMBER:
        raise InvalidPersonError("Only family members have a profession")

    fields = {"name": name, "surname": surname, "birth_date": birth_date, "gender": gender}
    if kind == PersonKind.FRIEND:
        fields["relation"] = relation
    elif kind == PersonKind.FAMILY_MEMBER:
        fields["profession"] = profession
    return _VARIANTS[kind](**fields)
