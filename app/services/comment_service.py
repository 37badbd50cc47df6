# app/services/comment_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, asc, desc
from sqlalchemy.exc import SQLAlchemyError
from app.core.exceptions import ValidationError, NotFoundError, ForbiddenError, InternalError
from app.core.logging_config import log_user_action
from app.models.comment import CommentModel
from app.models.review import ReviewModel
from app.models.user import UserModel
from app.schemas.comment import Comment, CommentListResponse
from app.schemas.common import Pagination
from app.schemas.user import UserProfile
from app.services.notification_service import Notifier

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 1000


class CommentService:

    def __init__(self, db: Session, notifier: Optional[Notifier] = None):
        self.db = db
        self.notifier = notifier or Notifier(db)

    async def create_comment(
        self, user_id: int, review_id: Optional[int], content: Optional[str]
    ) -> Comment:
        """Comment on a review.

        Checks run in a fixed order: review id present, content non-empty after
        trimming, raw (untrimmed) length within MAX_COMMENT_LENGTH, review exists.
        The stored content is the trimmed text.
        """
        if review_id is None:
            raise ValidationError("Review ID is required")
        if not content or not content.strip():
            raise ValidationError("Comment content is required")
        if len(content) > MAX_COMMENT_LENGTH:
            raise ValidationError(f"Comment too long (max {MAX_COMMENT_LENGTH} characters)")

        review = self.db.get(ReviewModel, review_id)
        if review is None:
            raise NotFoundError("Review not found")

        comment_model = CommentModel(review_id=review_id, user_id=user_id, content=content.strip())
        try:
            self.db.add(comment_model)
            self.db.commit()
            self.db.refresh(comment_model)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Comment on review %s by user %s failed", review_id, user_id)
            raise InternalError()

        log_user_action(logger, user_id, "comment", f"review_id={review_id}")

        author = self.db.get(UserModel, user_id)
        comment = self._build_comment_response(comment_model, author)

        if review.user_id != user_id:
            self.notifier.notify(
                review.user_id,
                "comment",
                "New comment",
                f"{author.public_name} commented on your review of {review.beverage_name}",
                {
                    "review_id": review_id,
                    "comment_id": comment.comment_id,
                    "commenter_id": user_id,
                    "commenter_username": author.username,
                },
            )

        return comment

    async def get_review_comments(
        self, review_id: int, page: int = 1, limit: int = 20, order: str = "oldest"
    ) -> CommentListResponse:
        if self.db.get(ReviewModel, review_id) is None:
            raise NotFoundError("Review not found")

        direction = desc if order == "newest" else asc
        stmt = (
            select(CommentModel, UserModel)
            .join(UserModel, CommentModel.user_id == UserModel.user_id)
            .where(CommentModel.review_id == review_id)
            .order_by(direction(CommentModel.created_at), direction(CommentModel.comment_id))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()

        items = [
            self._build_comment_response(comment_model, author) for comment_model, author in rows
        ]
        total = self.get_comment_count(review_id)

        return CommentListResponse(items=items, pagination=Pagination.build(page, limit, total))

    async def delete_comment(self, comment_id: int, user_id: int, is_admin: bool = False) -> None:
        """Author, review owner or an admin may delete a comment"""
        comment_model = self.db.get(CommentModel, comment_id)
        if comment_model is None:
            raise NotFoundError("Comment not found")

        review = self.db.get(ReviewModel, comment_model.review_id)
        review_owner_id = review.user_id if review else None
        if not is_admin and user_id not in (comment_model.user_id, review_owner_id):
            raise ForbiddenError("Not authorized to delete this comment")

        try:
            self.db.delete(comment_model)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Delete of comment %s failed", comment_id)
            raise InternalError()

        log_user_action(logger, user_id, "delete_comment", f"comment_id={comment_id}")

    def get_comment_count(self, review_id: int) -> int:
        stmt = select(func.count(CommentModel.comment_id)).where(
            CommentModel.review_id == review_id
        )
        return self.db.execute(stmt).scalar() or 0

    def _build_comment_response(self, comment_model: CommentModel, author: UserModel) -> Comment:
        return Comment(
            comment_id=comment_model.comment_id,
            review_id=comment_model.review_id,
            user_id=comment_model.user_id,
            content=comment_model.content,
            created_at=comment_model.created_at,
            author=UserProfile.model_validate(author),
        )
