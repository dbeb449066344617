"""User service - credential store for accounts and password verification"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
from todo_api.models.user import User
from todo_api.core.security import get_password_hash, verify_password
from todo_api.core.exceptions import CredentialStoreError, DuplicateEmailError
import logging

logger = logging.getLogger(__name__)

# Compared against when the email is unknown so both login failures cost one bcrypt check.
_DUMMY_PASSWORD_HASH = get_password_hash("dummy-password-for-timing")


class UserService:
    """Service for user accounts"""

    @staticmethod
    def create_user(db: Session, username: str, email: str, password: str) -> User:
        """
        Create new user with a salted password hash

        Args:
            db: Database session
            username: Display name
            email: Unique email address
            password: Plain text password

        Returns:
            Created user

        Raises:
            DuplicateEmailError: Email already registered
            CredentialStoreError: Any other storage failure
        """
        email = email.strip().lower()
        if UserService.get_user_by_email(db, email):
            raise DuplicateEmailError()

        user = User(
            username=username,
            email=email,
            password_hash=get_password_hash(password),
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email.
            db.rollback()
            raise DuplicateEmailError()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to create user {email}: {e}")
            raise CredentialStoreError() from e

        db.refresh(user)
        logger.info(f"Created user: {user.id}")
        return user

    @staticmethod
    def verify_credentials(db: Session, email: str, password: str) -> Optional[User]:
        """
        Return the user if the email exists and the password matches

        Unknown email and wrong password both return None.
        """
        user = UserService.get_user_by_email(db, email)
        if not user:
            verify_password(password, _DUMMY_PASSWORD_HASH)
            return None

        if not verify_password(password, user.password_hash):
            return None

        return user

    @staticmethod
    def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.strip().lower()).first()


# Singleton instance
user_service = UserService()
