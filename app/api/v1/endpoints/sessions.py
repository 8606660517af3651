# app/api/v1/endpoints/sessions.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session

from app.schemas.session import Session as SessionSchema, SessionCreate, SessionUpdate
from app.schemas.token import TokenPayload
from app.api import deps
from app.db.session import get_db
from app.crud import crud_session

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("", response_model=List[SessionSchema])
def list_sessions(db: Session = Depends(get_db)):
    """Retrieve all sessions, ordered by start time."""
    return crud_session.session.get_multi(db)


@router.get("/{session_id}", response_model=SessionSchema)
def get_session(session_id: int, db: Session = Depends(get_db)):
    """Retrieve a specific session by its ID."""
    session = crud_session.session.get(db, id=session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return session


@router.post("", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
def create_session(
    session_in: SessionCreate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Create a new session."""
    return crud_session.session.create(db, obj_in=session_in)


@router.put("/{session_id}", response_model=SessionSchema)
def update_session(
    session_id: int,
    session_in: SessionUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Update a session's details."""
    session = crud_session.session.get(db, id=session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return crud_session.session.update(db, db_obj=session, obj_in=session_in)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    session = crud_session.session.get(db, id=session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    crud_session.session.remove(db, id=session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
