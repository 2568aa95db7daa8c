import typing as tp

from users_service.models.common import Error, ErrorResponse


def error_example(
    description: str,
    *errors: Error,
) -> tp.Dict[str, tp.Any]:
    return {
        "model": ErrorResponse,
        "description": description,
        "content": {
            "application/json": {
                "example": ErrorResponse(errors=list(errors)).model_dump(),
            },
        },
    }


bad_request = error_example(
    "Error: Bad Request",
    Error(
        error_key="invalid_user_email",
        error_message="invalid user email",
        error_loc=None,
    ),
    Error(
        error_key="missing",
        error_message="Field required",
        error_loc=["body", "name"],
    ),
)

not_found = error_example(
    "Error: User not found",
    Error(
        error_key="user_not_found",
        error_message="user not found",
        error_loc=None,
    ),
)

already_exists = error_example(
    "Error: User already exists",
    Error(
        error_key="user_already_exists",
        error_message="user already exists",
        error_loc=None,
    ),
)
