from fastapi import FastAPI

from .debug import router as debug_router
from .health import router as health_router
from .users import router as users_router

API_PREFIX = "/api/v1"


def add_routes(app: FastAPI, with_debug: bool = False) -> None:
    for router in (
        health_router,
        users_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    if with_debug:
        app.include_router(debug_router, prefix=API_PREFIX)
