from __future__ import annotations

from pydantic import BaseModel


class IdentityDTO(BaseModel):
    id: str
    email: str
    name: str | None = None


class SessionDTO(BaseModel):
    token: str
    token_type: str = "bearer"
    identity: IdentityDTO
    redirect: str
