import typing as tp
from http import HTTPStatus

from users_service.errors import ErrorKind

ERROR_STATUSES: tp.Dict[ErrorKind, HTTPStatus] = {
    ErrorKind.user_not_found: HTTPStatus.NOT_FOUND,
    ErrorKind.user_already_exists: HTTPStatus.CONFLICT,
    ErrorKind.invalid_user_id: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_user_email: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_user_name: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_user_role: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_otp: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_otp_expires_at: HTTPStatus.BAD_REQUEST,
    ErrorKind.invalid_input: HTTPStatus.BAD_REQUEST,
    ErrorKind.validation_failed: HTTPStatus.BAD_REQUEST,
    ErrorKind.unauthorized: HTTPStatus.UNAUTHORIZED,
    ErrorKind.forbidden: HTTPStatus.FORBIDDEN,
    ErrorKind.internal_error: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def get_error_status(kind: ErrorKind) -> HTTPStatus:
    return ERROR_STATUSES.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR)


class AppException(Exception):
    def __init__(
        self,
        status_code: int,
        error_key: str,
        error_message: str = "",
        error_loc: tp.Optional[tp.Sequence[str]] = None,
    ) -> None:
        self.error_key = error_key
        self.error_message = error_message
        self.error_loc = error_loc
        self.status_code = status_code
        super().__init__()


class MissingFieldsException(AppException):
    def __init__(
        self,
        status_code: int = HTTPStatus.BAD_REQUEST,
        error_key: str = "missing_required_fields",
        error_message: str = "email and name are required",
        error_loc: tp.Optional[tp.Sequence[str]] = None,
    ):
        super().__init__(status_code, error_key, error_message, error_loc)
