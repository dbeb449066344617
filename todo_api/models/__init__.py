"""Database models"""

from todo_api.models.user import User
from todo_api.models.todo import Todo
from todo_api.models.revoked_token import RevokedToken

__all__ = ["User", "Todo", "RevokedToken"]
