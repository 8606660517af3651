# app/schemas/session.py
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import datetime
from .speaker import Speaker


class SessionBase(BaseModel):
    title: str = Field(
        ..., min_length=1, max_length=200, json_schema_extra={"example": "The Future of LLM's"}
    )
    abstract: Optional[str] = Field(None, max_length=4000)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    track: Optional[str] = Field(None, max_length=200)


class SessionCreate(SessionBase):
    speaker_ids: Optional[List[int]] = []

    @model_validator(mode="after")
    def check_time_window(self):
        if self.start_time and self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class SessionUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    abstract: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    track: Optional[str] = None
    speaker_ids: Optional[List[int]] = None


class Session(SessionBase):
    id: int
    speakers: List[Speaker] = []

    model_config = {"from_attributes": True}
