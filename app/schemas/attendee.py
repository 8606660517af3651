# app/schemas/attendee.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List


class AttendeeProfile(BaseModel):
    """The fields an attendee types in on the sign-up form."""

    first_name: str = Field(..., max_length=200, json_schema_extra={"example": "Ada"})
    last_name: str = Field(..., max_length=200, json_schema_extra={"example": "Lovelace"})
    email_address: EmailStr = Field(..., json_schema_extra={"example": "ada@example.com"})

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def not_blank(cls, value):
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class AttendeeCreate(AttendeeProfile):
    user_name: str = Field(..., min_length=1, max_length=200)

    @field_validator("user_name", mode="before")
    @classmethod
    def user_name_not_blank(cls, value):
        if isinstance(value, str) and not value.strip():
            raise ValueError("must not be blank")
        return value


class Attendee(AttendeeCreate):
    id: int
    session_ids: List[int] = []

    model_config = {"from_attributes": True}
