"""
User-related database models.
"""

from sqlalchemy import Column, Index, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class AppUser(Base):
    """User account, identified on each request by its session token"""

    __tablename__ = "app_user"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    session_id = Column(Text, unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("uq_app_user_email_lower", func.lower(email), unique=True),
    )

    # Relationships
    meals = relationship(
        "Meal", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
