# app/schemas/search.py
from pydantic import BaseModel, Field
from typing import List

from .session import Session
from .speaker import Speaker


class SearchTerm(BaseModel):
    query: str = Field(..., min_length=1, max_length=200)


class SearchResult(BaseModel):
    sessions: List[Session] = []
    speakers: List[Speaker] = []
