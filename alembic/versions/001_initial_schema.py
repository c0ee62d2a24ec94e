"""Initial schema — users, skills, interests, profiles, requests, sessions, feedback.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("profile_picture", sa.Text, nullable=True),
        sa.Column("location", sa.String(200), nullable=True),
        sa.Column("timezone", sa.String(100), nullable=True),
        sa.Column("bio", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "user_skills",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("level", sa.String(20), nullable=False),
        _created_at(),
    )
    op.create_index("ix_user_skills_user_id", "user_skills", ["user_id"])

    op.create_table(
        "learning_interests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("level", sa.String(20), nullable=False),
        _created_at(),
    )
    op.create_index("ix_learning_interests_user_id", "learning_interests", ["user_id"])

    op.create_table(
        "user_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, unique=True),
        sa.Column("learning_modes", sa.JSON, nullable=False),
        sa.Column("availability", sa.JSON, nullable=False),
        sa.Column("learning_goals", sa.Text, nullable=True),
        sa.Column("learning_intensity", sa.String(20), nullable=True),
        sa.Column("teaching_styles", sa.JSON, nullable=False),
        sa.Column("motivation", sa.Text, nullable=True),
        _created_at(),
    )

    op.create_table(
        "skill_requests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("from_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("to_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("teach_skill_id", sa.Integer, sa.ForeignKey("user_skills.id"), nullable=True),
        sa.Column(
            "learn_skill_id", sa.Integer, sa.ForeignKey("learning_interests.id"), nullable=True,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("proposed_schedule", sa.DateTime(timezone=True), nullable=True),
        sa.Column("message", sa.Text, nullable=True),
        _created_at(),
    )
    op.create_index("ix_skill_requests_from_user_id", "skill_requests", ["from_user_id"])
    op.create_index("ix_skill_requests_to_user_id", "skill_requests", ["to_user_id"])

    op.create_table(
        "learning_sessions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("request_id", sa.Integer, sa.ForeignKey("skill_requests.id"), nullable=True),
        sa.Column("teacher_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("learner_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("scheduled_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("scheduled_end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="scheduled"),
        sa.Column("meeting_link", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        _created_at(),
    )
    op.create_index("ix_learning_sessions_teacher_id", "learning_sessions", ["teacher_id"])
    op.create_index("ix_learning_sessions_learner_id", "learning_sessions", ["learner_id"])

    op.create_table(
        "session_feedback",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "session_id", sa.Integer, sa.ForeignKey("learning_sessions.id"), nullable=False,
        ),
        sa.Column("from_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("to_user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("comment", sa.Text, nullable=True),
        _created_at(),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_session_feedback_rating"),
    )
    op.create_index("ix_session_feedback_session_id", "session_feedback", ["session_id"])
    op.create_index("ix_session_feedback_to_user_id", "session_feedback", ["to_user_id"])


def downgrade() -> None:
    op.drop_table("session_feedback")
    op.drop_table("learning_sessions")
    op.drop_table("skill_requests")
    op.drop_table("user_profiles")
    op.drop_table("learning_interests")
    op.drop_table("user_skills")
    op.drop_table("users")
