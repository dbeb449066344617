"""Todo schemas"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class TodoCreate(BaseModel):
    """Create todo schema"""
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=10000)

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Title is required')
        return v


class TodoUpdate(BaseModel):
    """Partial update schema; omitted fields are left unchanged"""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=10000)
    completed: Optional[bool] = None

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError('Title must not be blank')
        return v


class TodoResponse(BaseModel):
    """Todo response schema"""
    id: UUID
    title: str
    description: str
    completed: bool
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
