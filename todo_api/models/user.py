"""User model"""

import uuid

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.orm import relationship
from todo_api.core.database import Base
from todo_api.core.security import utcnow


class User(Base):
    """User model for authentication and ownership"""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")
    revoked_tokens = relationship("RevokedToken", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
