# app/schemas/common.py

from math import ceil
from pydantic import BaseModel, Field


class Pagination(BaseModel):
    page: int = Field(description="Current page (1-based)")
    limit: int = Field(description="Page size")
    total: int = Field(description="Total number of items")
    pages: int = Field(description="Total number of pages")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=ceil(total / limit) if limit else 0)


class MessageResponse(BaseModel):
    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(description="Human readable result")
