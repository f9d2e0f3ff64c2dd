"""Person data model definitions.

`Person` is the capability set shared by three variants. Each variant carries
a `kind` tag, which is also the discriminator of `AnyPerson`, so code that
needs a concrete variant switches on `kind` instead of down-casting.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Iterable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, computed_field

from profiles.core.exceptions import RelationNotDefinedError
from profiles.utils.validators import lower_text


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


# Case-insensitive on input.
GenderField = Annotated[Gender, BeforeValidator(lower_text)]


class PersonKind(str, Enum):
    USER = "user"
    FRIEND = "friend"
    FAMILY_MEMBER = "family_member"


WHO_AM_I: Dict[PersonKind, str] = {
    PersonKind.USER: "a user",
    PersonKind.FRIEND: "a friend",
    PersonKind.FAMILY_MEMBER: "a family member",
}


class Person(BaseModel):
    """Required attributes common to every variant.

    All four attributes are mandatory keyword arguments; leaving one out
    fails at construction. `birth_date` is free text and is not parsed.
    """

    model_config = ConfigDict(frozen=True)

    kind: PersonKind
    name: str
    surname: str
    birth_date: str
    gender: GenderField

    def __init__(self, **data: Any) -> None:
        if type(self) is Person:
            raise TypeError("Person cannot be instantiated directly; use User, Friend or FamilyMember")
        super().__init__(**data)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def who_am_i(self) -> str:
        return WHO_AM_I[self.kind]

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"


class Friend(Person):
    kind: Literal[PersonKind.FRIEND] = PersonKind.FRIEND
    relation: Optional[str] = None

    def check_relation(self) -> str:
        """Return the relation, or raise `RelationNotDefinedError` when it is absent."""

        if self.relation is not None:
            return self.relation
        raise RelationNotDefinedError()


class FamilyMember(Person):
    kind: Literal[PersonKind.FAMILY_MEMBER] = PersonKind.FAMILY_MEMBER
    profession: Optional[str] = None


Associate = Annotated[Union[Friend, FamilyMember], Field(discriminator="kind")]


class User(Person):
    """The profile owner.

    `friends_and_family` is fixed at construction and references the same
    `Friend` / `FamilyMember` objects the registry holds.
    """

    kind: Literal[PersonKind.USER] = PersonKind.USER
    friends_and_family: Tuple[Associate, ...] = ()

    def with_friends_and_family(self, people: Iterable[Person]) -> User:
        return User(
            name=self.name,
            surname=self.surname,
            birth_date=self.birth_date,
            gender=self.gender,
            friends_and_family=tuple(people),
        )


AnyPerson = Annotated[Union[User, Friend, FamilyMember], Field(discriminator="kind")]
