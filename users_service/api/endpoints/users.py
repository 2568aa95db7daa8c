import typing as tp
from http import HTTPStatus

from fastapi import APIRouter, Query
from starlette.requests import Request

from users_service.api import responses
from users_service.api.exceptions import MissingFieldsException
from users_service.log import app_logger
from users_service.models.user import NewUser, UserInfo, UserUpdate
from users_service.services import get_user_service

from ..config import get_app_config

router = APIRouter()


@router.post(
    path="/users/",
    tags=["User"],
    status_code=HTTPStatus.CREATED,
    response_model=UserInfo,
    responses={
        400: responses.bad_request,
        409: responses.already_exists,
    },
)
async def create_user(request: Request, new_user: NewUser) -> UserInfo:
    if not new_user.email or not new_user.name:
        raise MissingFieldsException()

    user_service = get_user_service(request.app)
    user = await user_service.create_user(new_user.email, new_user.name)
    return UserInfo.from_user(user)


@router.get(
    path="/users/",
    tags=["User"],
    status_code=HTTPStatus.OK,
    response_model=tp.List[UserInfo],
)
async def list_users(
    request: Request,
    limit: tp.Optional[str] = Query(None, description="Page size"),
    offset: tp.Optional[str] = Query(None),
) -> tp.List[UserInfo]:
    app_config = get_app_config(request.app)
    page_size = app_config.page_size(limit)
    page_offset = app_config.page_offset(offset)
    app_logger.info(
        f"Listing users: limit {page_size}, offset {page_offset}"
    )

    user_service = get_user_service(request.app)
    users = await user_service.list_users(page_size, page_offset)
    return [UserInfo.from_user(user) for user in users]


@router.get(
    path="/users/{user_id}",
    tags=["User"],
    status_code=HTTPStatus.OK,
    response_model=UserInfo,
    responses={
        400: responses.bad_request,
        404: responses.not_found,
    },
)
async def get_user(request: Request, user_id: str) -> UserInfo:
    user_service = get_user_service(request.app)
    user = await user_service.get_user_by_id(user_id)
    return UserInfo.from_user(user)


@router.put(
    path="/users/{user_id}",
    tags=["User"],
    status_code=HTTPStatus.OK,
    response_model=UserInfo,
    responses={
        400: responses.bad_request,
        404: responses.not_found,
        409: responses.already_exists,
    },
)
async def update_user(
    request: Request,
    user_id: str,
    user_update: UserUpdate,
) -> UserInfo:
    user_service = get_user_service(request.app)
    user = await user_service.update_user(
        user_id,
        user_update.email or "",
        user_update.name or "",
    )
    return UserInfo.from_user(user)


@router.delete(
    path="/users/{user_id}",
    tags=["User"],
    status_code=HTTPStatus.NO_CONTENT,
    responses={
        400: responses.bad_request,
        404: responses.not_found,
    },
)
async def delete_user(request: Request, user_id: str) -> None:
    user_service = get_user_service(request.app)
    await user_service.delete_user(user_id)
