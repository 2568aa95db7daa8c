import typing as tp
from datetime import datetime, timedelta
from http import HTTPStatus
from uuid import uuid4

from httpx import Response

from users_service.db.models import UsersTable
from users_service.errors import DomainError, ErrorKind
from users_service.models.user import User, UserRole
from users_service.utils import utc_now


class FakeUserRepository:
    """In-memory `UserRepository` that records the calls it receives."""

    def __init__(self, users: tp.Iterable[User] = ()) -> None:
        self.users: tp.Dict[str, User] = {}
        self.calls: tp.List[str] = []
        self.error: tp.Optional[Exception] = None
        for user in users:
            self.users[user.id] = user.model_copy(deep=True)

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    def _email_taken(self, email: str, except_id: str = "") -> bool:
        return any(
            u.email == email and u.id != except_id
            for u in self.users.values()
        )

    async def create(self, user: User) -> None:
        self._call("create")
        if self._email_taken(user.email):
            raise DomainError(ErrorKind.user_already_exists)
        user.id = str(uuid4())
        self.users[user.id] = user.model_copy(deep=True)

    async def get_by_id(self, user_id: str) -> User:
        self._call("get_by_id")
        if user_id not in self.users:
            raise DomainError(ErrorKind.user_not_found)
        return self.users[user_id].model_copy(deep=True)

    async def get_by_email(self, email: str) -> User:
        self._call("get_by_email")
        for user in self.users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        raise DomainError(ErrorKind.user_not_found)

    async def update(self, user: User) -> None:
        self._call("update")
        if user.id not in self.users:
            raise DomainError(ErrorKind.user_not_found)
        if self._email_taken(user.email, except_id=user.id):
            raise DomainError(ErrorKind.user_already_exists)
        self.users[user.id] = user.model_copy(deep=True)

    async def delete(self, user_id: str) -> None:
        self._call("delete")
        if self.users.pop(user_id, None) is None:
            raise DomainError(ErrorKind.user_not_found)

    async def list(self, limit: int, offset: int) -> tp.List[User]:
        self._call("list")
        users = sorted(
            self.users.values(),
            key=lambda u: u.created_at,
            reverse=True,
        )
        return [u.model_copy(deep=True) for u in users[offset:offset + limit]]


def make_user(
    user_id: tp.Optional[str] = None,
    email: str = "user@example.com",
    name: str = "Test User",
    role: UserRole = UserRole.user,
    created_at: tp.Optional[datetime] = None,
    updated_at: tp.Optional[datetime] = None,
) -> User:
    created_at = created_at or utc_now() - timedelta(hours=1)
    return User(
        id=user_id if user_id is not None else str(uuid4()),
        email=email,
        name=name,
        role=role,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )


def make_db_user(
    email: str = "user@example.com",
    name: str = "Test User",
    **kwargs: tp.Any,
) -> UsersTable:
    now = utc_now()
    data = {
        "id": uuid4(),
        "email": email,
        "name": name,
        "created_at": now,
        "updated_at": now,
        "is_email_verified": False,
        "is_active": True,
        "role": UserRole.user.value,
    }
    data.update(kwargs)
    return UsersTable(**data)


def assert_error(
    resp: Response,
    status_code: HTTPStatus,
    error_key: str,
) -> None:
    assert resp.status_code == status_code
    assert resp.json()["errors"][0]["error_key"] == error_key
