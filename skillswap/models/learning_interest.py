"""LearningInterest ORM — a skill its owner wants to learn.

Invariants:
    - Always belongs to a User (user_id FK)
    - level is one of InterestLevel (Beginner, Intermediate, Advanced)
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillswap.db.base import Base


class LearningInterestModel(Base):
    __tablename__ = "learning_interests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    level: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["UserModel"] = relationship(
        "UserModel", back_populates="learning_interests",
    )
