from asyncpg import create_pool
from fastapi import FastAPI

from .db.service import DBService
from .db.user_repository import PostgresUserRepository
from .settings import ServiceConfig
from .users import UserService


def get_db_service(app: FastAPI) -> DBService:
    return app.state.db_service


def get_user_service(app: FastAPI) -> UserService:
    return app.state.user_service


def make_db_service(config: ServiceConfig) -> DBService:
    db_config = config.db_config.model_dump()
    pool_config = db_config.pop("db_pool_config")
    pool_config["dsn"] = str(pool_config.pop("db_url"))
    pool = create_pool(**pool_config)
    service = DBService(pool=pool, **db_config)
    return service


def make_user_service(db_service: DBService) -> UserService:
    repository = PostgresUserRepository(pool=db_service.pool)
    return UserService(repository=repository)
