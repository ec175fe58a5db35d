"""
Meal log model.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, BigInteger, Index, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal eaten by a user, flagged as on or off the diet"""

    __tablename__ = "meal"

    meal_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(BigInteger, nullable=False)  # epoch milliseconds
    is_on_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("AppUser", back_populates="meals")

    __table_args__ = (Index("ix_meal_user_date", "user_id", "date"),)
