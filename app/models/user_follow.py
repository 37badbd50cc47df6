# app/models/user_follow.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint
from app.database import Base, utcnow


class UserFollowModel(Base):
    __tablename__ = "user_follows"

    follower_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )  # the user who follows
    following_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True, index=True
    )  # the user being followed
    # microsecond resolution so edges created in the same second still sort by insertion
    created_at = Column(DateTime, default=utcnow)

    # composite primary key rejects duplicate edges
    __table_args__ = (
        CheckConstraint("follower_id <> following_id", name="no_self_follow"),
    )

    def __repr__(self):
        return (
            f"<UserFollowModel(follower_id={self.follower_id}, following_id={self.following_id})>"
        )
