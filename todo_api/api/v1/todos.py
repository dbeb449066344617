"""Todo routes - per-user CRUD"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from todo_api.core.database import get_db
from todo_api.schemas.todo import TodoCreate, TodoUpdate, TodoResponse
from todo_api.services.todo_service import todo_service
from todo_api.api.deps import AuthContext, get_auth_context

router = APIRouter()


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    data: TodoCreate,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    Create a todo for the current user

    Args:
        data: Title and optional description
        context: Current authenticated identity
        db: Database session

    Returns:
        Created todo
    """
    todo = todo_service.create_todo(db, context.user_id, data)
    return TodoResponse.model_validate(todo)


@router.get("", response_model=List[TodoResponse])
def list_todos(
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get all todos for the current user"""
    todos = todo_service.list_todos(db, context.user_id)
    return [TodoResponse.model_validate(todo) for todo in todos]


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get one todo; 404 if missing or owned by someone else"""
    todo = todo_service.get_todo(db, todo_id, context.user_id)
    return TodoResponse.model_validate(todo)


@router.put("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: UUID,
    data: TodoUpdate,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """
    Update title, description or completed flag

    Args:
        todo_id: Todo identifier
        data: Fields to change
        context: Current authenticated identity
        db: Database session

    Returns:
        Updated todo
    """
    todo = todo_service.update_todo(db, todo_id, context.user_id, data)
    return TodoResponse.model_validate(todo)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Delete a todo owned by the current user"""
    todo_service.delete_todo(db, todo_id, context.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
