"""
User endpoints.

List, fetch, create and update user health records held in the
application's ``UserDirectory``.  Request bodies are taken verbatim:
no required fields, no type checks and no id collision check.  The
only rejected update is one that would change a user's name.

A request without a body is treated as an empty object.  Path ids
are parsed leniently (see ``parse_user_id``); an id that
does not parse simply matches no user and yields 404.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from health_data_api.app.api.deps import get_directory
from health_data_api.app.schemas.user import USER_EXAMPLE, ErrorResponse, User
from health_data_api.app.services.errors import UserNotFoundError
from health_data_api.app.services.user_service import UserDirectory, parse_user_id

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}

# OpenAPI 3.0 has no schema-level ``examples``; these are attached
# to the media type instead.
_CREATE_EXAMPLES = {"john": {"summary": "Full user record", "value": USER_EXAMPLE}}
_UPDATE_EXAMPLES = {"partial": {"summary": "Change age and weight", "value": {"age": 31, "weight": 74}}}


@router.get(
    "",
    response_model=None,
    summary="Get list of registered users",
    responses={200: {"model": List[User], "description": "JSON formatted list of users"}},
)
async def list_users(directory: UserDirectory = Depends(get_directory)) -> List[Dict[str, Any]]:
    return directory.list_users()


@router.get(
    "/{user_id}",
    response_model=None,
    summary="Get user by ID",
    responses={200: {"model": User, "description": "User found"}, **_NOT_FOUND},
)
async def get_user(user_id: str, directory: UserDirectory = Depends(get_directory)) -> Dict[str, Any]:
    """Return the first user whose ``id`` matches, or 404."""
    user = directory.find_user(parse_user_id(user_id))
    if user is None:
        raise UserNotFoundError()
    return user


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={201: {"model": User, "description": "User created successfully"}},
)
async def create_user(
    user: Dict[str, Any] = Body(default_factory=dict, openapi_examples=_CREATE_EXAMPLES),
    directory: UserDirectory = Depends(get_directory),
) -> Dict[str, Any]:
    """Append the submitted user to the directory and echo it back."""
    return directory.create_user(user)


@router.put(
    "/{user_id}",
    response_model=None,
    summary="Update user by ID",
    responses={
        200: {"model": User, "description": "User updated successfully"},
        400: {"model": ErrorResponse, "description": "User name cannot be changed"},
        **_NOT_FOUND,
    },
)
async def update_user(
    user_id: str,
    changes: Dict[str, Any] = Body(default_factory=dict, openapi_examples=_UPDATE_EXAMPLES),
    directory: UserDirectory = Depends(get_directory),
) -> Dict[str, Any]:
    """Merge the submitted fields into an existing user.

    Fields absent from the body are left untouched.  Sending a
    ``name`` different from the stored one is rejected with 400.
    """
    return directory.update_user(parse_user_id(user_id), changes)
