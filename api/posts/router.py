"""
Post API endpoints. Reads are public; writes need a bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies
from core.schemas import RecordId
from users.schemas import UserResponse

from . import schemas
from .dependencies import get_post_registry
from .service import PostRegistry

router = APIRouter(prefix="/posts")


@router.post("", response_model=schemas.PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: schemas.CreatePostRequest,
    current_user: UserResponse = Depends(auth_dependencies.get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
) -> schemas.PostResponse:
    # Author comes from the verified identity, never from the body.
    return await posts.create(request, current_user.id)


@router.get("", response_model=list[schemas.PostResponse])
async def list_posts(
    posts: PostRegistry = Depends(get_post_registry),
) -> list[schemas.PostResponse]:
    return await posts.find_all()


@router.get("/{post_id}", response_model=schemas.PostResponse)
async def get_post(
    post_id: RecordId,
    posts: PostRegistry = Depends(get_post_registry),
) -> schemas.PostResponse:
    return await posts.find_one(post_id)


@router.patch("/{post_id}", response_model=schemas.PostResponse)
async def update_post(
    post_id: RecordId,
    request: schemas.UpdatePostRequest,
    current_user: UserResponse = Depends(auth_dependencies.get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
) -> schemas.PostResponse:
    return await posts.update(post_id, request, current_user.id)


@router.delete("/{post_id}")
async def delete_post(
    post_id: RecordId,
    current_user: UserResponse = Depends(auth_dependencies.get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
) -> dict:
    await posts.remove(post_id, current_user.id)
    return {"ok": True, "id": post_id}
