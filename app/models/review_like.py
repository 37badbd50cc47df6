# app/models/review_like.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from app.database import Base, utcnow


class ReviewLikeModel(Base):
    __tablename__ = "review_likes"

    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    review_id = Column(
        Integer, ForeignKey("reviews.review_id", ondelete="CASCADE"), primary_key=True, index=True
    )
    # microsecond resolution so edges created in the same second still sort by insertion
    created_at = Column(DateTime, default=utcnow)

    def __repr__(self):
        return f"<ReviewLikeModel(user_id={self.user_id}, review_id={self.review_id})>"
