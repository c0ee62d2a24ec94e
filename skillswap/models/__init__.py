"""ORM Models — SQLAlchemy declarative models for the seven SkillSwap tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Child tables reference parents by foreign key; nothing is deleted, so no cascades

Design Decisions:
    - One file per table
    - All models imported here so string-based relationship() references resolve
      before any query runs
"""

from skillswap.models.user import UserModel  # noqa: F401
from skillswap.models.user_skill import UserSkillModel  # noqa: F401
from skillswap.models.learning_interest import LearningInterestModel  # noqa: F401
from skillswap.models.user_profile import UserProfileModel  # noqa: F401
from skillswap.models.skill_request import SkillRequestModel  # noqa: F401
from skillswap.models.learning_session import LearningSessionModel  # noqa: F401
from skillswap.models.session_feedback import SessionFeedbackModel  # noqa: F401
