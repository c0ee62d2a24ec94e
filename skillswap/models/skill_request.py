"""SkillRequest ORM — directed proposal between two users to exchange instruction.

Invariants:
    - from_user_id != to_user_id (enforced by services before insert)
    - status transitions: pending -> accepted | rejected | cancelled (all terminal)
    - Only the status column changes after insert
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from skillswap.db.base import Base


class SkillRequestModel(Base):
    __tablename__ = "skill_requests"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    to_user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    teach_skill_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user_skills.id"), nullable=True,
    )
    learn_skill_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("learning_interests.id"), nullable=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    proposed_schedule: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
