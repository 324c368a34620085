# File: goraeph/api/v1/routes_users.py

"""
User account endpoints.

Request bodies are validated by their schemas before the service runs;
errors raised by the service are turned into responses by the handlers
in ``goraeph.core.errors``.
"""

from fastapi import APIRouter, Response, status

from goraeph.api.deps import UsersServiceDep
from goraeph.core.exceptions import UserNotFoundError
from goraeph.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter()


@router.get(
    "",
    response_model=list[UserRead],
    summary="List users",
)
def list_users(service: UsersServiceDep):
    return service.find_all()


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get a user by id",
    responses={404: {"description": "User not found"}},
)
def get_user(user_id: int, service: UsersServiceDep):
    user = service.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={409: {"description": "Username or email already in use"}},
)
def create_user(payload: UserCreate, service: UsersServiceDep):
    """
    Create a user after checking that neither the username nor the
    email is taken.
    """
    return service.create(payload)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update a user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Username or email already in use"},
    },
)
def update_user(user_id: int, payload: UserUpdate, service: UsersServiceDep):
    return service.update(user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={404: {"description": "User not found"}},
)
def delete_user(user_id: int, service: UsersServiceDep):
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
