"""API dependencies - authentication gate and request identity"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from todo_api.config import settings
from todo_api.core.database import get_db
from todo_api.core.exceptions import UnauthenticatedError
from todo_api.core.security import TokenCodec, parse_duration
from todo_api.services.auth_service import Authenticator

# HTTP Bearer token scheme; missing headers are reported by the gate itself
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthContext:
    """Identity resolved for the current request"""
    user_id: UUID
    token: str


@lru_cache()
def get_authenticator() -> Authenticator:
    """
    Build the process-wide authenticator from settings

    The signing secret is read once and handed to the codec explicitly.
    """
    codec = TokenCodec(settings.JWT_SECRET, parse_duration(settings.JWT_EXPIRATION))
    return Authenticator(codec)


def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
) -> AuthContext:
    """
    Resolve the caller from an ``Authorization: Bearer <token>`` header

    Args:
        credentials: Parsed bearer credentials, None if absent or not Bearer
        db: Database session
        authenticator: Token verifier

    Returns:
        Identity for the rest of the request

    Raises:
        UnauthenticatedError: Header missing or malformed, or token rejected
    """
    if credentials is None or not credentials.credentials.strip():
        raise UnauthenticatedError()

    token = credentials.credentials.strip()
    user_id = authenticator.verify(db, token)
    return AuthContext(user_id=user_id, token=token)
