# app/crud/crud_session.py
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from .base import CRUDBase
from app.models.session import Session as SessionModel
from app.models.speaker import Speaker
from app.schemas.session import SessionCreate, SessionUpdate


class CRUDSession(CRUDBase[SessionModel, SessionCreate, SessionUpdate]):
    def get_multi(
        self, db: Session, *, skip: int = 0, limit: Optional[int] = None
    ) -> List[SessionModel]:
        # Unscheduled sessions go last; id breaks ties. No limit returns every row.
        query = (
            db.query(self.model)
            .order_by(self.model.start_time.asc().nulls_last(), self.model.id)
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, *, obj_in: SessionCreate) -> SessionModel:
        speakers = []
        if obj_in.speaker_ids:
            speakers = (
                db.query(Speaker).filter(Speaker.id.in_(obj_in.speaker_ids)).all()
            )

        obj_in_data = obj_in.model_dump(exclude={"speaker_ids"})
        db_obj = self.model(**obj_in_data, speakers=speakers)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: SessionModel, obj_in: SessionUpdate
    ) -> SessionModel:
        # Simple fields first, through the base update.
        update_data = obj_in.model_dump(exclude_unset=True, exclude={"speaker_ids"})
        updated_session = super().update(db, db_obj=db_obj, obj_in=update_data)

        # Then the speaker relationship, if provided.
        if obj_in.speaker_ids is not None:
            speakers = db.query(Speaker).filter(Speaker.id.in_(obj_in.speaker_ids)).all()
            updated_session.speakers = speakers
            db.add(updated_session)
            db.commit()
            db.refresh(updated_session)

        return updated_session

    def search(self, db: Session, *, query: str) -> List[SessionModel]:
        pattern = f"%{query}%"
        return (
            db.query(self.model)
            .filter(
                or_(self.model.title.ilike(pattern), self.model.abstract.ilike(pattern))
            )
            .order_by(self.model.start_time.asc().nulls_last(), self.model.id)
            .all()
        )


session = CRUDSession(SessionModel)
