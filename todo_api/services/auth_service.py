"""Authenticator - registration, login, token verification and logout."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from todo_api.core.exceptions import (
    InvalidCredentialsError,
    TokenError,
    TokenRevokedError,
    UnauthenticatedError,
)
from todo_api.core.security import TokenClaims, TokenCodec
from todo_api.services.revocation_ledger import RevocationLedger, revocation_ledger
from todo_api.services.user_service import UserService, user_service

logger = logging.getLogger(__name__)


class Authenticator:
    """Compose the token codec, revocation ledger and credential store.

    Holds no persistent state of its own. Every token failure surfaces to
    callers as the same UnauthenticatedError; the specific reason is logged.
    """

    def __init__(
        self,
        codec: TokenCodec,
        ledger: RevocationLedger = revocation_ledger,
        users: UserService = user_service,
    ) -> None:
        self.codec = codec
        self.ledger = ledger
        self.users = users

    @property
    def token_ttl_seconds(self) -> int:
        return int(self.codec.ttl.total_seconds())

    def register(self, db: Session, username: str, email: str, password: str) -> str:
        user = self.users.create_user(db, username, email, password)
        logger.info("Registered user %s", user.id)
        return self.codec.issue(user.id)

    def login(self, db: Session, email: str, password: str) -> str:
        user = self.users.verify_credentials(db, email, password)
        if user is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return self.codec.issue(user.id)

    def _validate(self, db: Session, token: str) -> TokenClaims:
        claims = self.codec.parse_and_verify(token)
        # Ledger is only consulted for tokens that are cryptographically valid.
        if self.ledger.is_revoked(db, token):
            raise TokenRevokedError("Token has been revoked")
        return claims

    def verify(self, db: Session, token: str) -> UUID:
        try:
            claims = self._validate(db, token)
        except TokenError as exc:
            logger.info("Rejected token: reason=%s", exc.reason)
            raise UnauthenticatedError() from exc
        return claims.subject_id

    def logout(self, db: Session, token: str) -> None:
        try:
            claims = self._validate(db, token)
        except TokenError as exc:
            logger.info("Rejected logout: reason=%s", exc.reason)
            raise UnauthenticatedError() from exc

        self.ledger.revoke(db, token, claims.subject_id, claims.expires_at)
        logger.info("User %s logged out", claims.subject_id)
