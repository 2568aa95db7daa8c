import typing as tp

from pydantic import Field, PostgresDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):

    model_config = SettingsConfigDict(case_sensitive=False)


class LogConfig(Config):
    level: str = Field(default="INFO", validation_alias="log_level")
    datetime_format: str = "%Y-%m-%d %H:%M:%S"


class DBPoolConfig(Config):
    db_url: PostgresDsn
    min_size: int = 0
    max_size: int = 25
    max_queries: int = 1000
    max_inactive_connection_lifetime: int = 300
    timeout: float = 10
    command_timeout: float = 10
    statement_cache_size: int = 1024
    max_cached_statement_lifetime: int = 3600


class DBConfig(Config):
    db_pool_config: DBPoolConfig


class ServerConfig(Config):
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_timeout: int = 30  # seconds


class ServiceConfig(Config):
    service_name: str = "users_service"
    request_id_header: str = "X-Request-Id"
    app_env: str = "production"
    default_list_limit: int = 10
    max_list_limit: int = 100
    cors_allow_origins: tp.List[str] = ["*"]

    log_config: LogConfig
    db_config: DBConfig
    server_config: ServerConfig

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


def get_config() -> ServiceConfig:
    return ServiceConfig(
        log_config=LogConfig(),
        db_config=DBConfig(db_pool_config=DBPoolConfig()),
        server_config=ServerConfig(),
    )
