import uvicorn

from .api.app import create_app
from .settings import get_config


def main() -> None:
    config = get_config()
    app = create_app(config)
    uvicorn.run(
        app,
        host=config.server_config.host,
        port=config.server_config.port,
        loop="uvloop",
        log_config=None,
        timeout_graceful_shutdown=config.server_config.shutdown_timeout,
    )


if __name__ == "__main__":
    main()
