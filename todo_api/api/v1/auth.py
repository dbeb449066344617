"""Authentication routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from todo_api.core.database import get_db
from todo_api.core.exceptions import UnauthenticatedError
from todo_api.schemas.user import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from todo_api.schemas.response import MessageResponse
from todo_api.services.auth_service import Authenticator
from todo_api.services.user_service import user_service
from todo_api.api.deps import AuthContext, get_auth_context, get_authenticator

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Register endpoint - create an account and return a session token

    Args:
        data: Username, email and password
        db: Database session

    Returns:
        Session token
    """
    token = authenticator.register(db, data.username, data.email, data.password)
    return TokenResponse(token=token, expires_in=authenticator.token_ttl_seconds)


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Login endpoint - authenticate user and return a session token

    Args:
        credentials: Email and password
        db: Database session

    Returns:
        Session token
    """
    token = authenticator.login(db, credentials.email, credentials.password)
    return TokenResponse(token=token, expires_in=authenticator.token_ttl_seconds)


@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def logout(
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Logout endpoint - revoke the presented token

    Args:
        context: Current authenticated identity

    Returns:
        Success message
    """
    authenticator.logout(db, context.token)
    return MessageResponse(message="Successfully logged out")


@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    Get current user information
    """
    user = user_service.get_user_by_id(db, context.user_id)
    if user is None:
        # Account removed while the token was still live.
        raise UnauthenticatedError()
    return UserResponse.model_validate(user)
