from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import crud, schemas, serializers
from ..database import get_db
from ..validation import validate_match_payload

router = APIRouter(tags=["matches"])


def _parse_payload(payload: Any) -> schemas.MatchWrite:
    error = validate_match_payload(payload)
    if error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    try:
        return schemas.MatchWrite.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{location}: {first['msg']}",
        ) from exc


def _read_full(db: Session, match_id: int) -> schemas.MatchRead:
    match = crud.get_match_or_raise(db, match_id)
    goals, cards = crud.fetch_details(db, match_id)
    return serializers.match_to_read(match, goals, cards)


@router.get("", response_model=list[schemas.MatchSummary])
def list_matches(db: Session = Depends(get_db)) -> list[schemas.MatchSummary]:
    return [
        serializers.match_to_summary(match, goal_count, card_count)
        for match, goal_count, card_count in crud.list_matches(db)
    ]


@router.get("/{match_id}", response_model=schemas.MatchRead)
def get_match(match_id: int, db: Session = Depends(get_db)) -> schemas.MatchRead:
    try:
        return _read_full(db, match_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("", response_model=schemas.MatchRead, status_code=status.HTTP_201_CREATED)
def create_match(payload: Any = Body(default=None), db: Session = Depends(get_db)) -> schemas.MatchRead:
    data = _parse_payload(payload)
    match = crud.create_match(db, data)
    return _read_full(db, match.id)


@router.put("/{match_id}", response_model=schemas.MatchRead)
def update_match(
    match_id: int,
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
) -> schemas.MatchRead:
    data = _parse_payload(payload)
    try:
        crud.update_match(db, match_id, data)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return _read_full(db, match_id)


@router.delete("/{match_id}", response_model=schemas.OkResponse)
def delete_match(match_id: int, db: Session = Depends(get_db)) -> schemas.OkResponse:
    try:
        crud.delete_match(db, match_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return schemas.OkResponse(ok=True)
