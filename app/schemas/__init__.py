# app/schemas/__init__.py

from .common import Pagination, MessageResponse
from .user import User, UserProfile, UserCreate, UserLogin, TokenResponse, UserDetail
from .user_follow import FollowUser, FollowStats, FollowListResponse, FollowCheckResponse
from .review import Review, ReviewCreate, ReviewResponse
from .review_like import LikeUser, LikeListResponse, LikeCheckResponse
from .comment import Comment, CommentCreate, CommentResponse, CommentListResponse
from .notification import (
    Notification,
    NotificationListResponse,
    NotificationPreferences,
    NotificationPreferencesUpdate,
)

__all__ = [
    "Pagination",
    "MessageResponse",
    "User",
    "UserProfile",
    "UserCreate",
    "UserLogin",
    "TokenResponse",
    "UserDetail",
    "FollowUser",
    "FollowStats",
    "FollowListResponse",
    "FollowCheckResponse",
    "Review",
    "ReviewCreate",
    "ReviewResponse",
    "LikeUser",
    "LikeListResponse",
    "LikeCheckResponse",
    "Comment",
    "CommentCreate",
    "CommentResponse",
    "CommentListResponse",
    "Notification",
    "NotificationListResponse",
    "NotificationPreferences",
    "NotificationPreferencesUpdate",
]
