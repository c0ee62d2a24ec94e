"""User ORM — identity and display fields of a marketplace member.

Invariants:
    - username and email are unique
    - password holds a werkzeug scrypt hash (core/passwords.py), never the plain text
    - Users are never deleted
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillswap.db.base import Base


class UserModel(Base):
    """users table — parent of every other SkillSwap table."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    profile_picture: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)
    timezone: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    profile: Mapped["UserProfileModel"] = relationship(
        "UserProfileModel", back_populates="user", uselist=False,
    )
    skills: Mapped[list["UserSkillModel"]] = relationship(
        "UserSkillModel", back_populates="user",
    )
    learning_interests: Mapped[list["LearningInterestModel"]] = relationship(
        "LearningInterestModel", back_populates="user",
    )
