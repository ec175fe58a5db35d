"""
Identity store: registers users and binds them to a session token.
"""

from typing import Optional, Tuple
from uuid import uuid4
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser
from repositories import UserRepository
from app.exceptions import ConflictError, UnauthorizedError

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for users and session tokens"""

    @staticmethod
    def new_session_token() -> str:
        return str(uuid4())

    @staticmethod
    def register(
        db: Session, name: str, email: str, session_id: Optional[str] = None
    ) -> Tuple[AppUser, bool]:
        """
        Create a user and bind a session token to it.

        The email is stored as given; uniqueness ignores case.

        A token the client already holds is reused when no other user owns
        it; otherwise a fresh one is minted. Returns ``(user, issued)`` where
        ``issued`` tells the caller to set the session cookie.

        Raises:
            ConflictError: if the email is already registered
        """
        user_repo = UserRepository(db)

        existing = user_repo.get_by_email(email)
        if existing:
            logger.warning(f"user_register_conflict email={email}")
            raise ConflictError(f"email '{existing.email}' already exists")

        issued = False
        if not session_id or user_repo.get_by_session_id(session_id) is not None:
            session_id = UserService.new_session_token()
            issued = True

        user = user_repo.create_user(session_id=session_id, name=name, email=email)
        logger.info(f"user_registered user_id={user.user_id} token_issued={issued}")
        return user, issued

    @staticmethod
    def authenticate(db: Session, session_id: Optional[str]) -> AppUser:
        """
        Resolve a session token to its user.

        Raises:
            UnauthorizedError: if the token is missing or matches no user
        """
        if not session_id:
            raise UnauthorizedError("missing session token")

        user = UserRepository(db).get_by_session_id(session_id)
        if user is None:
            logger.info("session_rejected reason=unknown_token")
            raise UnauthorizedError("unknown session token")
        return user
