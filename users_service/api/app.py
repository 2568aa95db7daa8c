from fastapi import FastAPI

from ..log import setup_logging
from ..settings import ServiceConfig
from .config import AppConfig, set_app_config
from .endpoints import add_routes
from .events import make_lifespan
from .exception_handlers import add_exception_handlers
from .middlewares import add_middlewares

__all__ = ("create_app",)


def create_app(config: ServiceConfig) -> FastAPI:
    setup_logging(config)

    app = FastAPI(
        title="Users Service",
        debug=False,
        lifespan=make_lifespan(config),
    )

    set_app_config(app, AppConfig.from_service_config(config))

    add_routes(app, with_debug=config.is_development)
    add_middlewares(app, config.request_id_header, config.cors_allow_origins)
    add_exception_handlers(app)

    return app
