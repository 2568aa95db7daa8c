import typing as tp

from pydantic import BaseModel


class Error(BaseModel):
    error_key: str
    error_message: str
    error_loc: tp.Optional[tp.Sequence[str]] = None


class ErrorResponse(BaseModel):
    errors: tp.List[Error]
