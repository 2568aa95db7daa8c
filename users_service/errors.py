import typing as tp
from enum import Enum


class ErrorKind(str, Enum):
    user_not_found = "user_not_found"
    user_already_exists = "user_already_exists"
    invalid_user_id = "invalid_user_id"
    invalid_user_email = "invalid_user_email"
    invalid_user_name = "invalid_user_name"
    invalid_user_role = "invalid_user_role"
    invalid_otp = "invalid_otp"
    invalid_otp_expires_at = "invalid_otp_expires_at"
    invalid_input = "invalid_input"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    validation_failed = "validation_failed"
    internal_error = "internal_error"


ERROR_MESSAGES: tp.Dict[ErrorKind, str] = {
    ErrorKind.user_not_found: "user not found",
    ErrorKind.user_already_exists: "user already exists",
    ErrorKind.invalid_user_id: "invalid user ID",
    ErrorKind.invalid_user_email: "invalid user email",
    ErrorKind.invalid_user_name: "invalid user name",
    ErrorKind.invalid_user_role: "invalid user role",
    ErrorKind.invalid_otp: "invalid OTP",
    ErrorKind.invalid_otp_expires_at: "OTP expires at is in the past",
    ErrorKind.invalid_input: "invalid input",
    ErrorKind.unauthorized: "unauthorized",
    ErrorKind.forbidden: "forbidden",
    ErrorKind.validation_failed: "validation failed",
    ErrorKind.internal_error: "internal server error",
}


class DomainError(Exception):
    """
    Failure of a user operation.

    Callers branch on `kind`, never on the message. `cause` keeps the
    original exception when a lower layer error is wrapped.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: tp.Optional[str] = None,
        cause: tp.Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message

    def __repr__(self) -> str:
        return f"DomainError({self.kind.value!r}, {self.message!r})"
