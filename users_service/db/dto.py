import typing as tp
from datetime import datetime
from uuid import UUID

from asyncpg import Record
from pydantic import BaseModel

from users_service.models.user import User

USER_COLUMNS = """
    id
    , email
    , name
    , is_email_verified
    , is_active
    , otp
    , otp_expires_at
    , role
    , created_at
    , updated_at
"""


class UserRecord(BaseModel):
    """Row of the `users` table."""

    id: tp.Optional[UUID] = None
    email: str
    name: str
    is_email_verified: bool
    is_active: bool
    otp: tp.Optional[str]
    otp_expires_at: tp.Optional[datetime]
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: Record) -> "UserRecord":
        return cls(**dict(record))

    @classmethod
    def from_domain(cls, user: User) -> "UserRecord":
        return cls(
            id=UUID(user.id) if user.id else None,
            email=user.email,
            name=user.name,
            is_email_verified=user.is_email_verified,
            is_active=user.is_active,
            otp=user.otp,
            otp_expires_at=user.otp_expires_at,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_domain(self) -> User:
        return User.restore(
            id=str(self.id) if self.id is not None else "",
            email=self.email,
            name=self.name,
            role=self.role,
            is_email_verified=self.is_email_verified,
            is_active=self.is_active,
            otp=self.otp,
            otp_expires_at=self.otp_expires_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
