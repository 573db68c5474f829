"""User, principal and token data models for authentication"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class UserRecord(BaseModel):
    """Persisted account record"""

    id: str = Field(default_factory=lambda: str(uuid4()))
    email: str
    password_hash: str
    role: Role = Role.USER
    name: Optional[str] = None
    picture: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Principal(BaseModel):
    """An authenticated identity with its role"""

    model_config = ConfigDict(frozen=True)

    email: str
    role: Role
    user_id: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_record(cls, user: UserRecord) -> "Principal":
        return cls(
            email=user.email,
            role=user.role,
            user_id=user.id,
            name=user.name,
            picture=user.picture,
        )


class GoogleIdentity(BaseModel):
    """Profile returned by Google's userinfo endpoint (already verified upstream)"""

    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None


class TokenClaims(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str
    email: str
    role: Role
    issued_at: datetime
    expires_at: datetime


class PublicUser(BaseModel):
    """User shape returned to clients (never includes the password hash)"""

    id: str
    email: str
    role: Role
    name: Optional[str] = None
    picture: Optional[str] = None

    @classmethod
    def from_principal(cls, principal: Principal) -> "PublicUser":
        return cls(
            id=principal.user_id or "",
            email=principal.email,
            role=principal.role,
            name=principal.name,
            picture=principal.picture,
        )
