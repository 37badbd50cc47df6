# app/schemas/comment.py

from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.schemas.common import Pagination
from app.schemas.user import UserProfile


class Comment(BaseModel):
    comment_id: int = Field(description="Comment ID")
    review_id: int = Field(description="Review ID")
    user_id: int = Field(description="Author ID")
    content: str = Field(description="Comment body")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    author: UserProfile = Field(description="Author projection")


class CommentCreate(BaseModel):
    # presence and length are checked by CommentService so the error order is fixed
    review_id: Optional[int] = Field(default=None, description="Review ID")
    content: Optional[str] = Field(default=None, description="Comment body (max 1000 chars)")


class CommentResponse(BaseModel):
    success: bool = Field(default=True)
    comment: Comment


class CommentListResponse(BaseModel):
    success: bool = Field(default=True)
    items: List[Comment] = Field(description="Comments")
    pagination: Pagination
