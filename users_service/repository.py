import typing as tp

from .models.user import User


@tp.runtime_checkable
class UserRepository(tp.Protocol):
    """
    Storage of users.

    Implementations report missing users (and updates or deletes that touch
    no row) with `DomainError(ErrorKind.user_not_found)` so that callers never
    see storage specific errors.
    """

    async def create(self, user: User) -> None:
        """Store a new user and set its `id`."""
        ...

    async def get_by_id(self, user_id: str) -> User:
        ...

    async def get_by_email(self, email: str) -> User:
        ...

    async def update(self, user: User) -> None:
        ...

    async def delete(self, user_id: str) -> None:
        ...

    async def list(self, limit: int, offset: int) -> tp.List[User]:
        """Newest users first."""
        ...
