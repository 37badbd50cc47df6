# app/services/__init__.py

from .user_service import UserService
from .review_service import ReviewService
from .user_follow_service import UserFollowService
from .review_like_service import ReviewLikeService
from .comment_service import CommentService
from .notification_service import Notifier, NotificationService

__all__ = [
    "UserService",
    "ReviewService",
    "UserFollowService",
    "ReviewLikeService",
    "CommentService",
    "Notifier",
    "NotificationService",
]
