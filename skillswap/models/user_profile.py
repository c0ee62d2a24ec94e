"""UserProfile ORM — one-to-one preference extension of a User.

Invariants:
    - user_id is unique (at most one profile per user)
    - availability is a 3x7 boolean grid (timeslot x weekday), validated before insert

Design Decisions:
    - JSON columns for learning_modes, teaching_styles and availability: stored as-is,
      portable between PostgreSQL and the SQLite test database
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillswap.core.domain_types import empty_availability
from skillswap.db.base import Base


class UserProfileModel(Base):
    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, unique=True,
    )
    learning_modes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    availability: Mapped[list] = mapped_column(
        JSON, nullable=False, default=empty_availability,
    )
    learning_goals: Mapped[str | None] = mapped_column(Text, nullable=True)
    learning_intensity: Mapped[str | None] = mapped_column(String(20), nullable=True)
    teaching_styles: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    motivation: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["UserModel"] = relationship("UserModel", back_populates="profile")
