"""Pydantic schemas for API validation"""

from todo_api.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    TokenResponse,
)
from todo_api.schemas.todo import TodoCreate, TodoUpdate, TodoResponse
from todo_api.schemas.response import MessageResponse

__all__ = [
    "RegisterRequest", "LoginRequest", "UserResponse", "TokenResponse",
    "TodoCreate", "TodoUpdate", "TodoResponse",
    "MessageResponse",
]
