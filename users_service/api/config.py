import typing as tp

from fastapi import FastAPI
from pydantic import BaseModel

from users_service.settings import ServiceConfig


def parse_int(value: tp.Optional[str]) -> tp.Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class AppConfig(BaseModel):
    """Request level limits used by the endpoints."""

    default_list_limit: int
    max_list_limit: int

    @classmethod
    def from_service_config(cls, config: ServiceConfig) -> "AppConfig":
        return cls(
            default_list_limit=config.default_list_limit,
            max_list_limit=config.max_list_limit,
        )

    def page_size(self, limit: tp.Optional[str]) -> int:
        """Unparsable or non-positive values fall back to the default."""
        value = parse_int(limit)
        if value is None or value < 1:
            return self.default_list_limit
        return min(value, self.max_list_limit)

    def page_offset(self, offset: tp.Optional[str]) -> int:
        value = parse_int(offset)
        if value is None or value < 0:
            return 0
        return value


def get_app_config(app: FastAPI) -> AppConfig:
    return app.state.config


def set_app_config(app: FastAPI, config: AppConfig) -> None:
    app.state.config = config
