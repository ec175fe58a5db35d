"""
User Repository - Data access layer for users and their session tokens
"""

from typing import Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: UUID) -> Optional[AppUser]:
        """Get user by ID"""
        return self.db.query(AppUser).filter(AppUser.user_id == user_id).first()

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email, ignoring case"""
        return (
            self.db.query(AppUser)
            .filter(func.lower(AppUser.email) == email.lower())
            .first()
        )

    def get_by_session_id(self, session_id: str) -> Optional[AppUser]:
        """Get the user owning a session token (exact match)"""
        return (
            self.db.query(AppUser).filter(AppUser.session_id == session_id).first()
        )

    def create_user(self, session_id: str, name: str, email: str) -> AppUser:
        """Create a new user bound to ``session_id``"""
        user = AppUser(session_id=session_id, name=name, email=email)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise ConflictError(f"email '{email}' already exists")
