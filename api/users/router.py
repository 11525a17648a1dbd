"""
User API endpoints. Every route requires a bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core.schemas import RecordId
from posts.dependencies import get_post_registry
from posts.schemas import PostResponse
from posts.service import PostRegistry

from . import schemas
from .dependencies import get_user_directory
from .service import UserDirectory

router = APIRouter(
    prefix="/users",
    dependencies=[Depends(auth_dependencies.get_current_user)],
)


@router.get("", response_model=list[schemas.UserResponse])
async def list_users(
    users: UserDirectory = Depends(get_user_directory),
) -> list[schemas.UserResponse]:
    return await users.find_all()


@router.get("/{user_id}", response_model=schemas.UserResponse)
async def get_user(
    user_id: RecordId,
    users: UserDirectory = Depends(get_user_directory),
) -> schemas.UserResponse:
    return await users.find_by_id(user_id)


@router.get("/{user_id}/posts", response_model=list[PostResponse])
async def list_user_posts(
    user_id: RecordId,
    users: UserDirectory = Depends(get_user_directory),
    posts: PostRegistry = Depends(get_post_registry),
) -> list[PostResponse]:
    await users.find_by_id(user_id)
    return await posts.find_by_author(user_id)


@router.patch("/{user_id}", response_model=schemas.UserResponse)
async def update_user(
    user_id: RecordId,
    request: schemas.UpdateUserRequest,
    users: UserDirectory = Depends(get_user_directory),
) -> schemas.UserResponse:
    return await users.update(user_id, request)


@router.delete("/{user_id}")
async def delete_user(
    user_id: RecordId,
    users: UserDirectory = Depends(get_user_directory),
) -> dict:
    await users.remove(user_id)
    return {"ok": True, "id": user_id}
