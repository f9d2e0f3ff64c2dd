"""Endpoints over the session registry of friends and family members."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from profiles.api.dependencies import get_registry
from profiles.forms import build_person
from profiles.models import AnyPerson, GenderField, PersonKind
from profiles.registry import PersonRegistry
from profiles.validation import check_relation


router = APIRouter(prefix="/people", tags=["people"])


class PersonCreateRequest(BaseModel):
    kind: PersonKind
    name: str
    surname: str
    birth_date: str
    gender: GenderField
    relation: Optional[str] = None
    profession: Optional[str] = None


class SummaryResponse(BaseModel):
    friend_names: str
    family_member_names: str


class RelationResponse(BaseModel):
    relation: str


@router.post("", response_model=AnyPerson, status_code=status.HTTP_201_CREATED)
async def add_person(payload: PersonCreateRequest, people: PersonRegistry = Depends(get_registry)):
    """Create a person from form fields and append it to the registry."""

    person = build_person(
        payload.kind,
        name=payload.name,
        surname=payload.surname,
        birth_date=payload.birth_date,
        gender=payload.gender,
        relation=payload.relation,
        profession=payload.profession,
    )
    people.add_person(person)
    return person


@router.get("", response_model=List[AnyPerson])
async def list_people(people: PersonRegistry = Depends(get_registry)):
    return list(people.people)


@router.get("/summary", response_model=SummaryResponse)
async def summary(people: PersonRegistry = Depends(get_registry)) -> SummaryResponse:
    return SummaryResponse(
        friend_names=people.get_friend_names(),
        family_member_names=people.get_family_member_names(),
    )


@router.get("/{index}/relation", response_model=RelationResponse)
async def relation(index: int, people: PersonRegistry = Depends(get_registry)) -> RelationResponse:
    """Return the relation of the friend at `index`, failing when it is absent."""

    return RelationResponse(relation=check_relation(people.get(index)))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_people(people: PersonRegistry = Depends(get_registry)) -> Response:
    people.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
