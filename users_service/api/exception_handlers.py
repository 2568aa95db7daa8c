import typing as tp
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import Response

from users_service.errors import DomainError, ErrorKind
from users_service.log import app_logger
from users_service.models.common import Error
from users_service.response import create_error_response

from .exceptions import AppException, get_error_status


async def app_exception_handler(
    request: Request,
    exc: AppException,
) -> Response:
    errors = [
        Error(
            error_key=exc.error_key,
            error_message=exc.error_message,
            error_loc=exc.error_loc,
        ),
    ]
    return create_error_response(exc.status_code, errors)


async def domain_error_handler(
    request: Request,
    exc: DomainError,
) -> Response:
    status_code = get_error_status(exc.kind)
    if status_code == HTTPStatus.INTERNAL_SERVER_ERROR:
        app_logger.error(f"{request.method} {request.url.path} failed: {exc}")
    errors = [Error(error_key=exc.kind.value, error_message=exc.message)]
    return create_error_response(status_code, errors)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> Response:
    errors = [
        Error(
            error_key=err["type"],
            error_message=err["msg"],
            error_loc=[str(x) for x in err["loc"]],
        )
        for err in exc.errors()
    ]
    return create_error_response(HTTPStatus.BAD_REQUEST, errors)


async def http_exception_handler(
    request: Request,
    exc: HTTPException,
) -> Response:
    status = HTTPStatus(exc.status_code)
    errors = [
        Error(
            error_key=status.phrase.lower().replace(" ", "_"),
            error_message=str(exc.detail),
        ),
    ]
    return create_error_response(exc.status_code, errors, exc.headers)


async def default_error_handler(
    request: Request,
    exc: Exception,
) -> Response:
    app_logger.exception(f"Unhandled error on {request.url.path}")
    errors = [
        Error(
            error_key=ErrorKind.internal_error.value,
            error_message="Internal server error",
        ),
    ]
    return create_error_response(HTTPStatus.INTERNAL_SERVER_ERROR, errors)


def add_exception_handlers(app: FastAPI) -> None:
    handlers: tp.Dict[tp.Type[Exception], tp.Callable[..., tp.Any]] = {
        AppException: app_exception_handler,
        DomainError: domain_error_handler,
        RequestValidationError: validation_error_handler,
        HTTPException: http_exception_handler,
        Exception: default_error_handler,
    }
    for exc_type, handler in handlers.items():
        app.add_exception_handler(exc_type, handler)
