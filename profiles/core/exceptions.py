"""Exception hierarchy for the profiles service."""

from __future__ import annotations

from fastapi import status

HTTP_422_UNPROCESSABLE = 422


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class PersonNotFoundError(NotFoundError):
    """Raised when a registry position holds no person."""

    code = "person_not_found"


class InvalidPersonError(ApplicationError):
    """Raised when form input cannot describe the requested kind of person."""

    status_code = HTTP_422_UNPROCESSABLE
    code = "invalid_person"


class NotAFriendError(ApplicationError):
    status_code = HTTP_422_UNPROCESSABLE
    code = "not_a_friend"


class RelationNotDefinedError(ApplicationError, ValueError):
    """Raised by `Friend.check_relation` when the friend has no relation."""

    status_code = HTTP_422_UNPROCESSABLE
    code = "relation_not_defined"

    def __init__(self, message: str = "Friend relation is not defined.") -> None:
        super().__init__(message)
