# app/crud/crud_speaker.py
from typing import List
from sqlalchemy import or_
from sqlalchemy.orm import Session
from .base import CRUDBase
from app.models.speaker import Speaker
from app.schemas.speaker import SpeakerCreate, SpeakerUpdate


class CRUDSpeaker(CRUDBase[Speaker, SpeakerCreate, SpeakerUpdate]):
    def search(self, db: Session, *, query: str) -> List[Speaker]:
        pattern = f"%{query}%"
        return (
            db.query(self.model)
            .filter(or_(self.model.name.ilike(pattern), self.model.bio.ilike(pattern)))
            .order_by(self.model.name)
            .all()
        )


speaker = CRUDSpeaker(Speaker)
