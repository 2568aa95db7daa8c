import logging
import logging.config
import typing as tp

from .context import REQUEST_ID
from .settings import ServiceConfig

app_logger = logging.getLogger("app")
access_logger = logging.getLogger("access")


class RequestIdFilter(logging.Filter):

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = REQUEST_ID.get("-")
        return True


def get_logging_config(config: ServiceConfig) -> tp.Dict[str, tp.Any]:
    level = config.log_config.level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {"()": RequestIdFilter},
        },
        "formatters": {
            "default": {
                "format": (
                    "%(asctime)s %(levelname)s [%(name)s] "
                    "[%(request_id)s] %(message)s"
                ),
                "datefmt": config.log_config.datetime_format,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "filters": ["request_id"],
            },
        },
        "loggers": {
            app_logger.name: {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
            access_logger.name: {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(config: ServiceConfig) -> None:
    logging.config.dictConfig(get_logging_config(config))
