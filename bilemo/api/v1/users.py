"""
User API endpoints.

Provides CRUD operations for user management within enterprise context.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from bilemo.core.dependencies import DBSession, Hasher
from bilemo.schemas.base import MAX_ID
from bilemo.schemas.user import UserCreate, UserUpdate, UserResponse
from bilemo.services.user_service import UserService

router = APIRouter()

EnterpriseUUID = Annotated[str, Path(description="The UUID of the enterprise.")]
UserID = Annotated[int, Path(ge=1, le=MAX_ID, description="The ID of the user.")]


@router.get(
    "/users/{uuid}",
    response_model=List[UserResponse],
    summary="List Users",
    description="Retrieve every user of an enterprise.",
    responses={404: {"description": "Enterprise not found"}},
)
async def list_users(
    uuid: EnterpriseUUID,
    session: DBSession,
) -> List[UserResponse]:
    service = UserService(session)
    users = await service.list(uuid)
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/user/{uuid}/{user_id}",
    response_model=UserResponse,
    summary="Get User",
    description="Retrieve a specific user for a given enterprise UUID and user ID.",
    responses={404: {"description": "Enterprise or user not found"}},
)
async def get_user(
    uuid: EnterpriseUUID,
    user_id: UserID,
    session: DBSession,
) -> UserResponse:
    service = UserService(session)
    user = await service.get(uuid, user_id)
    return UserResponse.model_validate(user)


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a new user in the enterprise named by `uuid`.",
    responses={
        400: {"description": "Missing required fields"},
        404: {"description": "Enterprise not found"},
        409: {"description": "Email already used in the enterprise"},
    },
)
async def create_user(
    data: UserCreate,
    session: DBSession,
    hasher: Hasher,
) -> UserResponse:
    """
    Create a new user.

    The password is hashed before storage and never returned.
    """
    service = UserService(session, hasher)
    user = await service.create(data)
    return UserResponse.model_validate(user)


@router.put(
    "/user/{uuid}/{user_id}",
    response_model=UserResponse,
    summary="Update User",
    description="Update user details. Only provided fields are updated.",
    responses={
        404: {"description": "Enterprise or user not found"},
        409: {"description": "Email already used in the enterprise"},
    },
)
async def update_user(
    uuid: EnterpriseUUID,
    user_id: UserID,
    data: UserUpdate,
    session: DBSession,
) -> UserResponse:
    service = UserService(session)
    user = await service.update(uuid, user_id, data)
    return UserResponse.model_validate(user)


@router.delete(
    "/user/{uuid}/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete User",
    description="Delete a user permanently.",
    responses={404: {"description": "Enterprise or user not found"}},
)
async def delete_user(
    uuid: EnterpriseUUID,
    user_id: UserID,
    session: DBSession,
) -> Response:
    service = UserService(session)
    await service.delete(uuid, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
