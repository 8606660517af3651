# app/schemas/token.py
from pydantic import BaseModel


class TokenPayload(BaseModel):
    sub: str  # "sub" carries the identity provider's user name
    exp: int  # Standard claim for expiration time

    model_config = {"from_attributes": True}
