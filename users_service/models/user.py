import re
import typing as tp
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel

from users_service.errors import DomainError, ErrorKind
from users_service.utils import utc_now

EMAIL_PATTERN = re.compile(
    r"[^\s@\x00-\x1f\x7f]+@[^\s@.\x00-\x1f\x7f]+(\.[^\s@.\x00-\x1f\x7f]+)+"
)
MAX_FIELD_LENGTH = 255  # width of users.email and users.name
OTP_LENGTH = 6


class UserRole(str, Enum):
    admin = "admin"
    user = "user"


def is_valid_email(email: str) -> bool:
    if not email or len(email) > MAX_FIELD_LENGTH:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_name(name: str) -> bool:
    return bool(name) and bool(name.strip()) and len(name) <= MAX_FIELD_LENGTH


class User(BaseModel):
    """
    User account.

    Build new users with `User.new` and users loaded from storage with
    `User.restore`; change email and name only through `update_email` and
    `update_name` so that validation and `updated_at` stay consistent.
    """

    id: str = ""
    email: str
    name: str
    role: UserRole = UserRole.user
    is_email_verified: bool = False
    is_active: bool = True
    otp: tp.Optional[str] = None
    otp_expires_at: tp.Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(cls, email: str, name: str) -> "User":
        if not is_valid_email(email):
            raise DomainError(ErrorKind.invalid_user_email)
        if not is_valid_name(name):
            raise DomainError(ErrorKind.invalid_user_name)
        now = utc_now()
        return cls(email=email, name=name, created_at=now, updated_at=now)

    @classmethod
    def restore(
        cls,
        id: str,
        email: str,
        name: str,
        role: str,
        is_email_verified: bool,
        is_active: bool,
        otp: tp.Optional[str],
        otp_expires_at: tp.Optional[datetime],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        try:
            user_role = UserRole(role)
        except ValueError:
            raise DomainError(ErrorKind.invalid_user_role)
        if otp is not None and len(otp) != OTP_LENGTH:
            raise DomainError(ErrorKind.invalid_otp)
        return cls(
            id=id,
            email=email,
            name=name,
            role=user_role,
            is_email_verified=is_email_verified,
            is_active=is_active,
            otp=otp,
            otp_expires_at=otp_expires_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def validate_email(self) -> bool:
        return is_valid_email(self.email)

    def update_email(self, new_email: str) -> None:
        if not is_valid_email(new_email):
            raise DomainError(ErrorKind.invalid_user_email)
        self.email = new_email
        self._touch()

    def update_name(self, new_name: str) -> None:
        if not is_valid_name(new_name):
            raise DomainError(ErrorKind.invalid_user_name)
        self.name = new_name
        self._touch()

    def set_otp(self, otp: str, expires_at: datetime) -> None:
        if len(otp) != OTP_LENGTH:
            raise DomainError(ErrorKind.invalid_otp)
        if expires_at <= utc_now():
            raise DomainError(ErrorKind.invalid_otp_expires_at)
        self.otp = otp
        self.otp_expires_at = expires_at
        self._touch()

    def _touch(self) -> None:
        # updated_at must grow even when the clock did not move
        self.updated_at = max(
            utc_now(),
            self.updated_at + timedelta(microseconds=1),
        )


class NewUser(BaseModel):
    email: str
    name: str


class UserUpdate(BaseModel):
    email: tp.Optional[str] = None
    name: tp.Optional[str] = None


class UserInfo(BaseModel):
    id: str
    email: str
    name: str
    role: UserRole
    is_email_verified: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(**user.model_dump(exclude={"otp", "otp_expires_at"}))
