"""Profile owner preview."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from profiles.api.dependencies import get_registry
from profiles.models import GenderField, User
from profiles.registry import PersonRegistry

router = APIRouter(prefix="/users", tags=["users"])


class UserPreviewRequest(BaseModel):
    name: str
    surname: str
    birth_date: str
    gender: GenderField


@router.post("/preview", response_model=User)
async def preview_user(payload: UserPreviewRequest, people: PersonRegistry = Depends(get_registry)) -> User:
    """Build the user with a snapshot of the registered friends and family.

    The user itself is not added to the registry.
    """

    return User(
        name=payload.name,
        surname=payload.surname,
        birth_date=payload.birth_date,
        gender=payload.gender,
        friends_and_family=tuple(people.associates()),
    )
