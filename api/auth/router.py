"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from users.schemas import UserResponse

from . import dependencies, schemas
from .service import AuthService

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: schemas.RegisterRequest,
    auth: AuthService = Depends(dependencies.get_auth_service),
) -> schemas.AuthResponse:
    return await auth.register(request)


@router.post("/login", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
async def login(
    request: schemas.LoginRequest,
    auth: AuthService = Depends(dependencies.get_auth_service),
) -> schemas.AuthResponse:
    return await auth.login(request)


@router.get("/profile", response_model=UserResponse)
async def profile(
    current_user: UserResponse = Depends(dependencies.get_current_user),
) -> UserResponse:
    return current_user
