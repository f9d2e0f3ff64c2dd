from .person import AnyPerson, Associate, FamilyMember, Friend, Gender, GenderField, Person, PersonKind, User, WHO_AM_I

__all__ = [
    "AnyPerson",
    "Associate",
    "FamilyMember",
    "Friend",
    "Gender",
    "GenderField",
    "Person",
    "PersonKind",
    "User",
    "WHO_AM_I",
]
