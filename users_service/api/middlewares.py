import time
import typing as tp
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from users_service.context import REQUEST_ID
from users_service.log import access_logger

from .exception_handlers import default_error_handler


class RequestIdMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: tp.Any, request_id_header: str) -> None:
        super().__init__(app)
        self.request_id_header = request_id_header

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(self.request_id_header, str(uuid4()))
        token = REQUEST_ID.set(request_id)
        try:
            try:
                response = await call_next(request)
            except Exception as e:  # pylint: disable=broad-except
                response = await default_error_handler(request, e)
            response.headers[self.request_id_header] = request_id
            return response
        finally:
            REQUEST_ID.reset(token)


class AccessMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started_at = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} "
            f"{response.status_code} {elapsed_ms:.1f}ms"
        )
        return response


def add_middlewares(
    app: FastAPI,
    request_id_header: str,
    cors_allow_origins: tp.Sequence[str],
) -> None:
    # The last added middleware runs first
    app.add_middleware(AccessMiddleware)
    app.add_middleware(RequestIdMiddleware, request_id_header=request_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_allow_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", request_id_header],
    )
