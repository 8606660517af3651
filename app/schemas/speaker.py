# app/schemas/speaker.py
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class SpeakerBase(BaseModel):
    name: str = Field(
        ..., min_length=1, max_length=200, json_schema_extra={"example": "Dr. Evelyn Reed"}
    )
    bio: Optional[str] = Field(
        None, max_length=4000, json_schema_extra={"example": "Lead AI Researcher at Futura Corp."}
    )
    web_site: Optional[str] = Field(None, max_length=1000)


class SpeakerCreate(SpeakerBase):
    pass


class SpeakerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    bio: Optional[str] = None
    web_site: Optional[str] = None


class Speaker(SpeakerBase):
    id: int

    model_config = {"from_attributes": True}


class SpeakerSession(BaseModel):
    """The slice of a session shown on a speaker's page."""

    id: int
    title: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SpeakerDetail(Speaker):
    sessions: List[SpeakerSession] = []
