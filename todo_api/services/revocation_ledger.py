"""Revocation ledger - server-side blacklist of logged-out session tokens."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.orm import Session

from todo_api.core.security import utcnow
from todo_api.models.revoked_token import RevokedToken

logger = logging.getLogger(__name__)


class RevocationLedger:
    """Persist and query revoked tokens.

    Lookups match the full token string, so revoking one session leaves the
    user's other sessions valid. Nothing is cached in-process.
    """

    @staticmethod
    def _naive_utc(dt: datetime) -> datetime:
        return dt.replace(tzinfo=None) if dt and dt.tzinfo else dt

    @staticmethod
    def revoke(db: Session, token: str, subject_id: UUID, expires_at: datetime) -> RevokedToken:
        record = RevokedToken(
            token=token,
            user_id=subject_id,
            expires_at=RevocationLedger._naive_utc(expires_at),
        )
        db.add(record)
        db.commit()
        logger.info("Revoked token for user %s (expires %s)", subject_id, record.expires_at.isoformat())
        return record

    @staticmethod
    def is_revoked(db: Session, token: str, now: Optional[datetime] = None) -> bool:
        current = RevocationLedger._naive_utc(now) if now else utcnow()
        match = (
            db.query(RevokedToken.id)
            .filter(RevokedToken.token == token, RevokedToken.expires_at > current)
            .first()
        )
        return match is not None

    @staticmethod
    def purge_expired(db: Session, now: Optional[datetime] = None) -> int:
        """Delete entries whose token has expired anyway. Returns rows removed."""
        current = RevocationLedger._naive_utc(now) if now else utcnow()
        result = db.execute(
            delete(RevokedToken).where(RevokedToken.expires_at <= current)
        )
        db.commit()
        removed = result.rowcount or 0
        if removed:
            logger.info("Purged %d expired revoked tokens", removed)
        return removed


revocation_ledger = RevocationLedger()
