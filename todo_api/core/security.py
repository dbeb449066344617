"""Security utilities - JWT session tokens, password hashing"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union
from uuid import UUID
import json
import re
import secrets

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError
import bcrypt

from todo_api.core.exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(hours=24)
MAX_TOKEN_TTL = timedelta(days=3650)

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_UNITS = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
}


def utcnow() -> datetime:
    """Current time as naive UTC, matching how timestamps are stored"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_timestamp(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def _from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc).replace(tzinfo=None)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password

    Returns:
        bool: True if password matches
    """
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt

    Args:
        password: Plain text password

    Returns:
        str: Hashed password
    """
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt()
    ).decode('utf-8')


def _normalize_ttl(ttl: Optional[timedelta]) -> timedelta:
    if ttl is None or ttl <= timedelta(0) or ttl > MAX_TOKEN_TTL:
        return DEFAULT_TOKEN_TTL
    return ttl


def parse_duration(value: Optional[str], default: timedelta = DEFAULT_TOKEN_TTL) -> timedelta:
    """
    Parse a duration string such as "24h", "90m" or "1h30m".

    Returns ``default`` when the value is empty, unparsable, not positive or
    longer than MAX_TOKEN_TTL.
    """
    if not value:
        return default

    raw = value.strip().lower()
    parts = _DURATION_PART.findall(raw)
    if not parts or "".join(f"{num}{unit}" for num, unit in parts) != raw:
        return default

    total = timedelta()
    try:
        for number, unit in parts:
            total += float(number) * _DURATION_UNITS[unit]
    except OverflowError:
        return default

    if total <= timedelta(0) or total > MAX_TOKEN_TTL:
        return default
    return total


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token"""
    subject_id: UUID
    issued_at: datetime
    expires_at: datetime
    token_id: str


def issue_token(
    subject_id: Union[UUID, str],
    secret: str,
    ttl: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Create a signed session token

    Args:
        subject_id: User the token is issued to
        secret: HMAC signing key
        ttl: Token lifetime, 24 hours when unset, not positive or above MAX_TOKEN_TTL
        now: Issue time (naive UTC), defaults to the current time

    Returns:
        str: Encoded JWT
    """
    ttl = _normalize_ttl(ttl)
    issued_at = now or utcnow()

    claims = {
        "sub": str(subject_id),
        "iat": _to_timestamp(issued_at),
        "exp": _to_timestamp(issued_at + ttl),
        "jti": secrets.token_urlsafe(16),  # Unique token ID
        "typ": "access",
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def parse_and_verify(token: str, secret: str, now: Optional[datetime] = None) -> TokenClaims:
    """
    Decode a session token and check its signature and expiry

    Raises:
        MalformedTokenError: Token or its claims cannot be decoded
        InvalidSignatureError: Wrong signing algorithm or MAC mismatch
        TokenExpiredError: Expiry is not in the future
    """
    try:
        header = jwt.get_unverified_header(token)
        unverified = jwt.get_unverified_claims(token)
    except (JWTError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedTokenError(str(exc)) from exc

    if not isinstance(header, dict) or not isinstance(unverified, dict):
        raise MalformedTokenError("Token segments are not JSON objects")

    # Refuse "none" and asymmetric algorithms before any key is used.
    if header.get("alg") != ALGORITHM:
        raise InvalidSignatureError(f"Unexpected signing method: {header.get('alg')}")

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTClaimsError as exc:
        raise MalformedTokenError(str(exc)) from exc
    except JWTError as exc:
        raise InvalidSignatureError(str(exc)) from exc

    try:
        subject_id = UUID(payload["sub"])
        expires_ts = int(payload["exp"])
        issued_ts = int(payload.get("iat", expires_ts))
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedTokenError("Token claims are missing or invalid") from exc

    current = now or utcnow()
    if expires_ts <= _to_timestamp(current):
        raise TokenExpiredError("Token has expired")

    return TokenClaims(
        subject_id=subject_id,
        issued_at=_from_timestamp(issued_ts),
        expires_at=_from_timestamp(expires_ts),
        token_id=str(payload.get("jti", "")),
    )


class TokenCodec:
    """Session token codec bound to one signing secret and lifetime."""

    def __init__(
        self,
        secret: str,
        ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = _normalize_ttl(ttl)
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject_id: Union[UUID, str]) -> str:
        return issue_token(subject_id, self._secret, self._ttl, now=self._clock())

    def parse_and_verify(self, token: str) -> TokenClaims:
        return parse_and_verify(token, self._secret, now=self._clock())
