import typing as tp
from http import HTTPStatus

import orjson
from pydantic import BaseModel
from starlette.responses import Response

from .models.common import Error, ErrorResponse


class ORJSONResponse(Response):
    media_type = "application/json"

    def render(self, content: tp.Any) -> bytes:
        if isinstance(content, BaseModel):
            content = content.model_dump(mode="json")
        return orjson.dumps(content)


def create_response(
    message: tp.Optional[str] = None,
    status_code: int = HTTPStatus.OK,
    **kwargs: tp.Any,
) -> ORJSONResponse:
    body = dict(kwargs)
    if message is not None:
        body["message"] = message
    return ORJSONResponse(content=body, status_code=status_code)


def create_error_response(
    status_code: int,
    errors: tp.List[Error],
    headers: tp.Optional[tp.Mapping[str, str]] = None,
) -> ORJSONResponse:
    return ORJSONResponse(
        content=ErrorResponse(errors=errors),
        status_code=status_code,
        headers=headers,
    )
