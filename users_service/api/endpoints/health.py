from http import HTTPStatus

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from users_service.response import create_response
from users_service.services import get_db_service
from users_service.utils import utc_now

router = APIRouter()


@router.get(
    path="/ping",
    tags=["Health"],
)
async def ping(_: Request) -> Response:
    return create_response(message="pong", status_code=HTTPStatus.OK)


@router.get(
    path="/health",
    tags=["Health"],
)
async def health(_: Request) -> Response:
    return create_response(
        status_code=HTTPStatus.OK,
        status="healthy",
        timestamp=utc_now().isoformat(timespec="seconds"),
    )


@router.get(
    path="/ready",
    tags=["Health"],
)
async def ready(request: Request) -> Response:
    await get_db_service(request.app).ping()
    return create_response(status_code=HTTPStatus.OK, status="ready")
