# taskapi/schemas/user.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterIn(BaseModel):
    model_config = _camel

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class VerificationRequestIn(BaseModel):
    email: EmailStr
