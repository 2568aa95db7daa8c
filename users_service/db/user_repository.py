import asyncio
import typing as tp
from contextlib import contextmanager
from uuid import UUID

from asyncpg import InterfaceError, Pool, PostgresError, UniqueViolationError
from pydantic import BaseModel, ConfigDict

from users_service.errors import DomainError, ErrorKind
from users_service.models.user import User

from .dto import USER_COLUMNS, UserRecord


def parse_user_id(user_id: str) -> UUID:
    try:
        return UUID(user_id)
    except ValueError:
        raise DomainError(ErrorKind.invalid_user_id)


def affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. "UPDATE 1" or "DELETE 0"
    return int(status.split()[-1])


@contextmanager
def storage_errors(action: str) -> tp.Iterator[None]:
    try:
        yield
    except UniqueViolationError as e:
        raise DomainError(ErrorKind.user_already_exists, cause=e) from e
    except (PostgresError, InterfaceError, OSError, asyncio.TimeoutError) as e:
        raise DomainError(
            ErrorKind.internal_error,
            f"failed to {action}",
            cause=e,
        ) from e


class PostgresUserRepository(BaseModel):
    pool: Pool

    model_config = ConfigDict(arbitrary_types_allowed=True)

    async def create(self, user: User) -> None:
        query = """
            INSERT INTO users
                (
                    email
                    , name
                    , is_email_verified
                    , is_active
                    , otp
                    , otp_expires_at
                    , role
                    , created_at
                    , updated_at
                )
            VALUES
                (
                    $1::VARCHAR
                    , $2::VARCHAR
                    , $3::BOOLEAN
                    , $4::BOOLEAN
                    , $5::VARCHAR
                    , $6::TIMESTAMPTZ
                    , $7::VARCHAR
                    , $8::TIMESTAMPTZ
                    , $9::TIMESTAMPTZ
                )
            RETURNING id
        """
        record = UserRecord.from_domain(user)
        with storage_errors("create user"):
            user_id = await self.pool.fetchval(
                query,
                record.email,
                record.name,
                record.is_email_verified,
                record.is_active,
                record.otp,
                record.otp_expires_at,
                record.role,
                record.created_at,
                record.updated_at,
            )
        user.id = str(user_id)

    async def get_by_id(self, user_id: str) -> User:
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE id = $1::UUID
        """
        uuid = parse_user_id(user_id)
        with storage_errors("get user by ID"):
            record = await self.pool.fetchrow(query, uuid)
        if record is None:
            raise DomainError(ErrorKind.user_not_found)
        return UserRecord.from_record(record).to_domain()

    async def get_by_email(self, email: str) -> User:
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            WHERE email = $1::VARCHAR
        """
        with storage_errors("get user by email"):
            record = await self.pool.fetchrow(query, email)
        if record is None:
            raise DomainError(ErrorKind.user_not_found)
        return UserRecord.from_record(record).to_domain()

    async def update(self, user: User) -> None:
        query = """
            UPDATE users
            SET
                email = $2::VARCHAR
                , name = $3::VARCHAR
                , is_email_verified = $4::BOOLEAN
                , is_active = $5::BOOLEAN
                , otp = $6::VARCHAR
                , otp_expires_at = $7::TIMESTAMPTZ
                , role = $8::VARCHAR
                , updated_at = $9::TIMESTAMPTZ
            WHERE id = $1::UUID
        """
        uuid = parse_user_id(user.id)
        record = UserRecord.from_domain(user)
        with storage_errors("update user"):
            status = await self.pool.execute(
                query,
                uuid,
                record.email,
                record.name,
                record.is_email_verified,
                record.is_active,
                record.otp,
                record.otp_expires_at,
                record.role,
                record.updated_at,
            )
        if affected_rows(status) == 0:
            raise DomainError(ErrorKind.user_not_found)

    async def delete(self, user_id: str) -> None:
        query = """
            DELETE FROM users
            WHERE id = $1::UUID
        """
        uuid = parse_user_id(user_id)
        with storage_errors("delete user"):
            status = await self.pool.execute(query, uuid)
        if affected_rows(status) == 0:
            raise DomainError(ErrorKind.user_not_found)

    async def list(self, limit: int, offset: int) -> tp.List[User]:
        query = f"""
            SELECT {USER_COLUMNS}
            FROM users
            ORDER BY created_at DESC
            LIMIT $1::INTEGER OFFSET $2::INTEGER
        """
        with storage_errors("list users"):
            records = await self.pool.fetch(query, limit, offset)
        return [UserRecord.from_record(r).to_domain() for r in records]
