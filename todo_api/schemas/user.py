"""User and authentication schemas"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


def _check_password_bytes(value: str) -> str:
    # bcrypt only accepts up to 72 bytes of input.
    if len(value.encode("utf-8")) > 72:
        raise ValueError("Password must be at most 72 bytes")
    return value


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    local, sep, domain = value.partition("@")
    if not sep or not local or "." not in domain or " " in value:
        raise ValueError("Invalid email address")
    return value


class RegisterRequest(BaseModel):
    """User registration schema"""
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator('username')
    @classmethod
    def strip_username(cls, v):
        """Reject blank usernames"""
        v = v.strip()
        if not v:
            raise ValueError('Username is required')
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return _normalize_email(v)

    @field_validator('password')
    @classmethod
    def password_length(cls, v):
        return _check_password_bytes(v)


class LoginRequest(BaseModel):
    """User login schema"""
    email: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator('email')
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower()

    @field_validator('password')
    @classmethod
    def password_length(cls, v):
        return _check_password_bytes(v)


class UserResponse(BaseModel):
    """User response schema (never includes the password hash)"""
    id: UUID
    username: str
    email: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """Session token response"""
    token: str
    token_type: str = "bearer"
    expires_in: int
