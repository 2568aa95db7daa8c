from http import HTTPStatus

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from users_service.response import create_response

router = APIRouter()


@router.get(
    path="/debug/routes",
    tags=["Debug"],
)
async def list_routes(request: Request) -> Response:
    paths = request.app.openapi()["paths"]
    routes = [
        f"{method.upper()} {path}"
        for path, operations in paths.items()
        for method in sorted(operations)
    ]
    return create_response(status_code=HTTPStatus.OK, routes=routes)
