"""Revocation ledger persistence model."""

import uuid

from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid, Index

from todo_api.core.database import Base
from todo_api.core.security import utcnow


class RevokedToken(Base):
    """Session token invalidated by logout before its natural expiry.

    expires_at mirrors the token's own exp so dead rows can be purged.
    """

    __tablename__ = "revoked_tokens"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    token = Column(Text, nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_revoked_tokens_token", "token"),
        Index("idx_revoked_tokens_expires_at", "expires_at"),
    )
