# app/api/v1/endpoints/search.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.crud import crud_session, crud_speaker
from app.schemas.search import SearchResult, SearchTerm

router = APIRouter(prefix="/search", tags=["Search"])


@router.post("", response_model=SearchResult)
def search(term: SearchTerm, db: Session = Depends(get_db)):
    """Case-insensitive search over session titles/abstracts and speaker names/bios."""
    return {
        "sessions": crud_session.session.search(db, query=term.query),
        "speakers": crud_speaker.speaker.search(db, query=term.query),
    }
