# taskapi/schemas/token.py
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TokenPair(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    refresh_token: str


class AuthResponse(BaseModel):
    message: str
    data: TokenPair


class StatusResponse(BaseModel):
    status: str = "success"


class SessionClaims(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int
    first_name: str
    last_name: str
    email: str
    exp: Optional[int] = None
