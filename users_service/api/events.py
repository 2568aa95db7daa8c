import typing as tp
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_service.log import app_logger
from users_service.services import (
    get_db_service,
    make_db_service,
    make_user_service,
)
from users_service.settings import ServiceConfig

Lifespan = tp.Callable[[FastAPI], tp.AsyncContextManager[None]]


def make_lifespan(config: ServiceConfig) -> Lifespan:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> tp.AsyncIterator[None]:
        app_logger.info("Startup started")
        # The pool must be created inside the running event loop
        db_service = make_db_service(config)
        app.state.db_service = db_service
        await db_service.setup()
        app.state.user_service = make_user_service(db_service)
        app_logger.info("Startup finished")

        yield

        app_logger.info("Shutdown started")
        await get_db_service(app).cleanup()
        app_logger.info("Shutdown finished")

    return lifespan
