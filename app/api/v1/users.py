# app/api/v1/users.py

from typing import Optional
from fastapi import APIRouter, Depends, Path
from app.core.exceptions import NotFoundError
from app.schemas.common import MessageResponse
from app.schemas.user import User, UserDetailResponse
from app.services.user_service import UserService
from app.core.dependencies import get_current_user, get_optional_current_user, get_user_service

router = APIRouter()


@router.get(
    "/me",
    response_model=UserDetailResponse,
    summary="My profile",
    description="Profile of the current user, including email."
)
async def get_my_profile(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    user_detail = await user_service.get_user_detail(current_user.user_id, current_user)
    return UserDetailResponse(user=user_detail)


@router.delete(
    "/me",
    response_model=MessageResponse,
    summary="Delete account",
    description="Delete the current user. Follows, likes, reviews and comments are removed with it."
)
async def delete_my_account(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    await user_service.delete_user(current_user.user_id)
    return MessageResponse(message="Account deleted")


@router.get(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="User profile",
    description="Public profile with follower, following and review counts."
)
async def get_user_detail(
    user_id: int = Path(description="User ID"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    user_service: UserService = Depends(get_user_service)
):
    user_detail = await user_service.get_user_detail(user_id, current_user)
    if not user_detail:
        raise NotFoundError("User not found")

    return UserDetailResponse(user=user_detail)
