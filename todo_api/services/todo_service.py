"""Todo service - per-user todo CRUD with ownership enforcement"""

from sqlalchemy.orm import Session
from sqlalchemy import update, delete
from typing import List, Optional
from uuid import UUID
from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate, TodoUpdate
from todo_api.core.exceptions import ResourceNotFoundError
from todo_api.core.security import utcnow
import logging

logger = logging.getLogger(__name__)


def ensure_owner(todo: Optional[Todo], user_id: UUID) -> Todo:
    """
    Resource owner check applied after loading a todo

    Missing and foreign records raise the same NotFound so a caller never
    learns whether another user's todo exists.
    """
    if todo is None or todo.user_id != user_id:
        raise ResourceNotFoundError("Todo")
    return todo


class TodoService:
    """Service for managing todos"""

    @staticmethod
    def create_todo(db: Session, user_id: UUID, data: TodoCreate) -> Todo:
        """
        Create a todo owned by the caller

        Args:
            db: Database session
            user_id: Authenticated user ID
            data: Todo fields

        Returns:
            Created todo
        """
        todo = Todo(
            title=data.title,
            description=data.description,
            completed=False,
            user_id=user_id,
        )
        db.add(todo)
        db.commit()
        db.refresh(todo)

        logger.info(f"Created todo {todo.id} for user {user_id}")
        return todo

    @staticmethod
    def list_todos(db: Session, user_id: UUID) -> List[Todo]:
        """Get all todos for a user, newest first"""
        return (
            db.query(Todo)
            .filter(Todo.user_id == user_id)
            .order_by(Todo.created_at.desc())
            .all()
        )

    @staticmethod
    def get_todo(db: Session, todo_id: UUID, user_id: UUID) -> Todo:
        """Get a todo by ID if it belongs to the user"""
        todo = db.query(Todo).filter(Todo.id == todo_id).first()
        return ensure_owner(todo, user_id)

    @staticmethod
    def update_todo(db: Session, todo_id: UUID, user_id: UUID, data: TodoUpdate) -> Todo:
        """
        Apply a partial update

        The write is scoped by owner, so zero affected rows means the todo is
        missing or belongs to someone else.
        """
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        values["updated_at"] = utcnow()

        result = db.execute(
            update(Todo)
            .where(Todo.id == todo_id, Todo.user_id == user_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            raise ResourceNotFoundError("Todo")
        db.commit()

        logger.info(f"Updated todo {todo_id} for user {user_id}")
        return TodoService.get_todo(db, todo_id, user_id)

    @staticmethod
    def delete_todo(db: Session, todo_id: UUID, user_id: UUID) -> None:
        """Delete a todo owned by the user"""
        result = db.execute(
            delete(Todo)
            .where(Todo.id == todo_id, Todo.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            db.rollback()
            raise ResourceNotFoundError("Todo")
        db.commit()

        logger.info(f"Deleted todo {todo_id} for user {user_id}")


# Singleton instance
todo_service = TodoService()
