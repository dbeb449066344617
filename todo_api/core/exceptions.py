"""Custom exception classes for the application"""

from typing import Optional, Dict, Any


class BaseAPIException(Exception):
    """Base exception for all API errors"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# Token errors. These never reach the client: the authenticator folds them
# into UnauthenticatedError and only logs the specific reason.
class TokenError(Exception):
    """Base class for session token failures"""
    reason = "invalid"


class MalformedTokenError(TokenError):
    """Token cannot be decoded"""
    reason = "malformed"


class InvalidSignatureError(TokenError):
    """Signature or signing algorithm does not match"""
    reason = "invalid_signature"


class TokenExpiredError(TokenError):
    """Token is past its expiry"""
    reason = "expired"


class TokenRevokedError(TokenError):
    """Token was revoked by logout"""
    reason = "revoked"


# Authentication Errors
class AuthenticationError(BaseAPIException):
    """Base authentication error"""
    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, status_code=401)


class UnauthenticatedError(AuthenticationError):
    """Missing, malformed, invalid, expired or revoked bearer token"""
    def __init__(self):
        super().__init__("Invalid or expired token")


class InvalidCredentialsError(AuthenticationError):
    """Invalid email or password"""
    def __init__(self):
        super().__init__("Invalid email or password")


# Resource Errors
class ResourceNotFoundError(BaseAPIException):
    """Resource not found"""
    def __init__(self, resource: str):
        super().__init__(f"{resource} not found", status_code=404)


class ResourceAlreadyExistsError(BaseAPIException):
    """Resource already exists"""
    def __init__(self, message: str):
        super().__init__(message, status_code=409)


class DuplicateEmailError(ResourceAlreadyExistsError):
    """Email already registered"""
    def __init__(self):
        super().__init__("User with this email already exists")


# Validation Errors
class ValidationError(BaseAPIException):
    """Validation error"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


# System Errors
class DatabaseError(BaseAPIException):
    """Database operation failed"""
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, status_code=500)


class CredentialStoreError(DatabaseError):
    """User record could not be persisted"""
    def __init__(self):
        super().__init__("Failed to create user")
