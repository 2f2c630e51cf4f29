# This file defines user request and response schemas.
# Request fields are all optional because presence rules live in the resource manager.
# Pydantic only coerces JSON types here; a missing name or email is reported by the manager.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields


class UserRecordV1(BaseModel):
    id: int
    name: str
    email: str
    role: str


class UserPayload(BaseModel):
    name: str | None = None
    email: str | None = None
    role: str | None = None


class UserResponseV1(EnvelopeFields):
    data: UserRecordV1


class UserListResponseV1(EnvelopeFields):
    data: list[UserRecordV1]
    count: int
