"""Auth DTOs: pure Pydantic."""
from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

_WIRE = {"alias_generator": to_camel, "populate_by_name": True}


class UserRole(str, Enum):
    READER = "reader"
    WRITER = "writer"
    ADMIN = "admin"


class LoginRequest(BaseModel):
    model_config = _WIRE

    user_name: str
    password: str


class AuthSession(BaseModel):
    model_config = _WIRE

    token: str
    role: str
    user_name: str | None = None


class RegisterRequest(BaseModel):
    model_config = _WIRE

    user_name: str
    email: str
    password: str
    role: UserRole = UserRole.READER

    @field_validator("user_name", "email", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class RegisterResponse(BaseModel):
    model_config = _WIRE

    user_name: str
    role: UserRole
