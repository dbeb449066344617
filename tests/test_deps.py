import os
import uuid

from todo_api.api import deps
from todo_api.core.security import issue_token

TEST_SECRET = os.environ["JWT_SECRET"]


def test_get_authenticator_uses_configured_expiration(monkeypatch):
    monkeypatch.setattr(deps.settings, "JWT_EXPIRATION", "24h")
    deps.get_authenticator.cache_clear()
    try:
        authenticator = deps.get_authenticator()
        assert authenticator.token_ttl_seconds == 86400
        assert deps.get_authenticator() is authenticator

        user_id = uuid.uuid4()
        claims = authenticator.codec.parse_and_verify(issue_token(user_id, TEST_SECRET))
        assert claims.subject_id == user_id
    finally:
        deps.get_authenticator.cache_clear()


def test_get_authenticator_falls_back_on_bad_expiration(monkeypatch):
    monkeypatch.setattr(deps.settings, "JWT_EXPIRATION", "99999999999h")
    deps.get_authenticator.cache_clear()
    try:
        assert deps.get_authenticator().token_ttl_seconds == 86400
    finally:
        deps.get_authenticator.cache_clear()
