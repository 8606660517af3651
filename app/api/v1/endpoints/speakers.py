# app/api/v1/endpoints/speakers.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.schemas.speaker import Speaker, SpeakerCreate, SpeakerDetail, SpeakerUpdate
from app.schemas.token import TokenPayload
from app.api import deps
from app.db.session import get_db
from app.crud import crud_speaker

router = APIRouter(prefix="/speakers", tags=["Speakers"])


@router.get("", response_model=List[Speaker])
def list_speakers(db: Session = Depends(get_db)):
    return crud_speaker.speaker.get_multi(db)


@router.get("/{speaker_id}", response_model=SpeakerDetail)
def get_speaker(speaker_id: int, db: Session = Depends(get_db)):
    """Retrieve a speaker together with the sessions they present."""
    speaker = crud_speaker.speaker.get(db, id=speaker_id)
    if not speaker:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Speaker not found"
        )
    return speaker


@router.post("", response_model=Speaker, status_code=status.HTTP_201_CREATED)
def create_speaker(
    speaker_in: SpeakerCreate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    return crud_speaker.speaker.create(db, obj_in=speaker_in)


@router.put("/{speaker_id}", response_model=Speaker)
def update_speaker(
    speaker_id: int,
    speaker_in: SpeakerUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    speaker = crud_speaker.speaker.get(db, id=speaker_id)
    if not speaker:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Speaker not found"
        )
    return crud_speaker.speaker.update(db, db_obj=speaker, obj_in=speaker_in)
