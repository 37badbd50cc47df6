# app/api/v1/social.py

from typing import Literal, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.user import User
from app.schemas.user_follow import (
    FollowCheckResponse,
    FollowListResponse,
    FollowStatsResponse,
)
from app.schemas.review_like import LikeCheckResponse, LikeListResponse
from app.schemas.comment import CommentCreate, CommentResponse, CommentListResponse
from app.services.user_follow_service import UserFollowService
from app.services.review_like_service import ReviewLikeService
from app.services.comment_service import CommentService
from app.core.dependencies import get_current_user, get_optional_current_user

router = APIRouter()


def get_follow_service(db: Session = Depends(get_db)) -> UserFollowService:
    return UserFollowService(db)


def get_like_service(db: Session = Depends(get_db)) -> ReviewLikeService:
    return ReviewLikeService(db)


def get_comment_service(db: Session = Depends(get_db)) -> CommentService:
    return CommentService(db)


# follows

@router.post(
    "/follow/{user_id}",
    response_model=MessageResponse,
    summary="Follow user",
    description="Follow another user. Fails if the target is yourself, missing, or already followed."
)
async def follow_user(
    user_id: int = Path(description="User to follow"),
    current_user: User = Depends(get_current_user),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    message = await follow_service.follow_user(current_user.user_id, user_id)
    return MessageResponse(message=message)


@router.delete(
    "/follow/{user_id}",
    response_model=MessageResponse,
    summary="Unfollow user",
    description="Remove a follow edge. Unfollowing a user you do not follow is an error."
)
async def unfollow_user(
    user_id: int = Path(description="User to unfollow"),
    current_user: User = Depends(get_current_user),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    message = await follow_service.unfollow_user(current_user.user_id, user_id)
    return MessageResponse(message=message)


@router.get(
    "/follow/check/{user_id}",
    response_model=FollowCheckResponse,
    summary="Check follow",
    description="Whether the current user follows the given user."
)
async def check_follow_relationship(
    user_id: int = Path(description="User to check"),
    current_user: User = Depends(get_current_user),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    following = await follow_service.is_following(current_user.user_id, user_id)
    return FollowCheckResponse(following=following)


@router.get(
    "/follow/stats/{user_id}",
    response_model=FollowStatsResponse,
    summary="Follow stats",
    description="Follower and following counts of a user."
)
async def get_follow_stats(
    user_id: int = Path(description="User ID"),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    stats = await follow_service.get_follow_stats(user_id)
    return FollowStatsResponse(stats=stats)


@router.get(
    "/followers/{user_id}",
    response_model=FollowListResponse,
    summary="Followers",
    description="Users following the given user, newest first."
)
async def get_followers(
    user_id: int = Path(description="User ID"),
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    current_user_id = current_user.user_id if current_user else None
    return await follow_service.get_followers(user_id, current_user_id, page, limit)


@router.get(
    "/following/{user_id}",
    response_model=FollowListResponse,
    summary="Following",
    description="Users the given user follows, newest first."
)
async def get_following(
    user_id: int = Path(description="User ID"),
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    current_user: Optional[User] = Depends(get_optional_current_user),
    follow_service: UserFollowService = Depends(get_follow_service)
):
    current_user_id = current_user.user_id if current_user else None
    return await follow_service.get_following(user_id, current_user_id, page, limit)


# likes

@router.post(
    "/like/{review_id}",
    response_model=MessageResponse,
    summary="Like review"
)
async def like_review(
    review_id: int = Path(description="Review ID"),
    current_user: User = Depends(get_current_user),
    like_service: ReviewLikeService = Depends(get_like_service)
):
    message = await like_service.like_review(current_user.user_id, review_id)
    return MessageResponse(message=message)


@router.delete(
    "/like/{review_id}",
    response_model=MessageResponse,
    summary="Unlike review"
)
async def unlike_review(
    review_id: int = Path(description="Review ID"),
    current_user: User = Depends(get_current_user),
    like_service: ReviewLikeService = Depends(get_like_service)
):
    message = await like_service.unlike_review(current_user.user_id, review_id)
    return MessageResponse(message=message)


@router.get(
    "/like/check/{review_id}",
    response_model=LikeCheckResponse,
    summary="Check like"
)
async def check_like(
    review_id: int = Path(description="Review ID"),
    current_user: User = Depends(get_current_user),
    like_service: ReviewLikeService = Depends(get_like_service)
):
    liked = await like_service.is_liked(current_user.user_id, review_id)
    return LikeCheckResponse(liked=liked)


@router.get(
    "/likes/{review_id}",
    response_model=LikeListResponse,
    summary="Review likes",
    description="Users who liked the review, newest first."
)
async def get_review_likes(
    review_id: int = Path(description="Review ID"),
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    like_service: ReviewLikeService = Depends(get_like_service)
):
    return await like_service.get_review_likes(review_id, page, limit)


# comments

@router.post(
    "/comment",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on review",
    description="Add a comment (1 ~ 1000 characters) to a review."
)
async def create_comment(
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service)
):
    comment = await comment_service.create_comment(
        current_user.user_id, comment_data.review_id, comment_data.content
    )
    return CommentResponse(comment=comment)


@router.get(
    "/comments/{review_id}",
    response_model=CommentListResponse,
    summary="Review comments"
)
async def get_review_comments(
    review_id: int = Path(description="Review ID"),
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    order: Literal["oldest", "newest"] = Query(default="oldest", description="Sort order"),
    comment_service: CommentService = Depends(get_comment_service)
):
    return await comment_service.get_review_comments(review_id, page, limit, order)


@router.delete(
    "/comment/{comment_id}",
    response_model=MessageResponse,
    summary="Delete comment",
    description="Comment author, review owner or an admin may delete a comment."
)
async def delete_comment(
    comment_id: int = Path(description="Comment ID"),
    current_user: User = Depends(get_current_user),
    comment_service: CommentService = Depends(get_comment_service)
):
    await comment_service.delete_comment(comment_id, current_user.user_id, current_user.is_admin)
    return MessageResponse(message="Comment deleted")
