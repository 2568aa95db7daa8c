import typing as tp

from pydantic import BaseModel, ConfigDict

from .errors import DomainError, ErrorKind
from .log import app_logger
from .models.user import User
from .repository import UserRepository


class UserService(BaseModel):
    """
    User lifecycle rules on top of a `UserRepository`.

    Every method is a single round trip to the repository, except
    `create_user` (lookup by email, then insert) and `update_user`
    (load, then save). The email check in `create_user` is not atomic with
    the insert: a concurrent insert of the same email is rejected by the
    storage unique index instead.
    """

    repository: UserRepository

    model_config = ConfigDict(arbitrary_types_allowed=True)

    async def create_user(self, email: str, name: str) -> User:
        try:
            await self.repository.get_by_email(email)
        except DomainError as e:
            if e.kind != ErrorKind.user_not_found:
                raise
        else:
            raise DomainError(ErrorKind.user_already_exists)

        user = User.new(email, name)
        await self.repository.create(user)
        app_logger.info(f"User {user.id} created")
        return user

    async def get_user_by_id(self, user_id: str) -> User:
        if not user_id:
            raise DomainError(ErrorKind.invalid_user_id)
        return await self.repository.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> User:
        return await self.repository.get_by_email(email)

    async def update_user(self, user_id: str, email: str, name: str) -> User:
        """Empty `email` or `name` means "keep the current value"."""
        if not user_id:
            raise DomainError(ErrorKind.invalid_user_id)
        user = await self.repository.get_by_id(user_id)

        if email:
            user.update_email(email)
        if name:
            user.update_name(name)

        await self.repository.update(user)
        app_logger.info(f"User {user_id} updated")
        return user

    async def delete_user(self, user_id: str) -> None:
        if not user_id:
            raise DomainError(ErrorKind.invalid_user_id)
        await self.repository.delete(user_id)
        app_logger.info(f"User {user_id} deleted")

    async def list_users(self, limit: int, offset: int) -> tp.List[User]:
        return await self.repository.list(limit, offset)
