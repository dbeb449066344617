"""Todo item model"""

import uuid

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship
from todo_api.core.database import Base
from todo_api.core.security import utcnow


class Todo(Base):
    """Todo item owned by a single user"""

    __tablename__ = "todos"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    completed = Column(Boolean, nullable=False, default=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="todos")

    __table_args__ = (
        Index('idx_todos_user_created', 'user_id', 'created_at'),
    )

    def __repr__(self):
        return f"<Todo(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
