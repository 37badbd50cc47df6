# app/models/__init__.py

from .user import UserModel
from .review import ReviewModel
from .user_follow import UserFollowModel
from .review_like import ReviewLikeModel
from .comment import CommentModel
from .notification import NotificationModel


__all__ = [
    "UserModel",
    "ReviewModel",
    "UserFollowModel",
    "ReviewLikeModel",
    "CommentModel",
    "NotificationModel",
]
