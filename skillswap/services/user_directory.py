"""User Directory — registration, login, profiles, skills and learning interests.

Invariants:
    - username and email are unique (ConflictError, checked before insert)
    - Passwords are hashed on the way in and never returned
    - Profiles are upserted: at most one per user, availability always 3x7
    - Skills and interests can only be attached to existing users
"""

import logging

from skillswap.core.domain_types import (
    UserId, SkillLevel, InterestLevel,
)
from skillswap.core.entities import Interest, Profile, Skill, User
from skillswap.core.enforce_invariants import check_availability_grid
from skillswap.core.errors import (
    ConflictError, ErrorContext, InvalidArgumentError, InvalidCredentialsError,
    ResourceNotFoundError,
)
from skillswap.core.passwords import hash_password, verify_password
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.lookups import require_user

logger = logging.getLogger(__name__)

PROFILE_FIELDS: tuple[str, ...] = (
    "learning_modes", "availability", "learning_goals",
    "learning_intensity", "teaching_styles", "motivation",
)


def _parse_level(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(level.value for level in enum_cls)
        raise InvalidArgumentError(
            f"Unknown level '{value}'. Allowed: {allowed}", "level",
        )


def _clean_name(name: str, field: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidArgumentError(f"{field} cannot be empty", field)
    return cleaned


class UserDirectory:

    def __init__(self, store: SkillSwapStore):
        self.store = store

    # ─── Accounts ────────────────────────────────────────────────

    async def register_user(
        self, username: str, email: str, password: str, **fields: object,
    ) -> User:
        username = _clean_name(username, "username")
        if await self.store.get_user_by_username(username):
            raise ConflictError(f"Username '{username}' is already taken", "username")
        if await self.store.get_user_by_email(email):
            raise ConflictError("Email is already registered", "email")
        user = await self.store.create_user(
            username=username,
            email=email,
            password_hash=hash_password(password),
            **fields,
        )
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate_user(self, username: str, password: str) -> User:
        user = await self.store.get_user_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()
        return user

    async def get_user(self, user_id: UserId) -> User:
        return await require_user(self.store, user_id)

    # ─── Profiles ────────────────────────────────────────────────

    async def update_profile(self, user_id: UserId, **fields: object) -> Profile:
        """Create or replace the user's profile; omitted fields keep their stored value."""
        unknown = set(fields) - set(PROFILE_FIELDS)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown profile fields: {', '.join(sorted(unknown))}", sorted(unknown)[0],
            )
        await require_user(self.store, user_id)
        # None means "keep what is stored"; new profiles fall back to the store defaults
        fields = {k: v for k, v in fields.items() if v is not None}
        if "availability" in fields:
            check_availability_grid(fields["availability"])
        for multi in ("learning_modes", "teaching_styles"):
            if multi in fields:
                fields[multi] = list(dict.fromkeys(fields[multi]))
        profile = await self.store.upsert_profile(user_id, **fields)
        logger.info("Profile saved", extra={"user_id": user_id})
        return profile

    async def find_profile(self, user_id: UserId) -> Profile | None:
        await require_user(self.store, user_id)
        return await self.store.get_profile(user_id)

    async def get_profile(self, user_id: UserId) -> Profile:
        profile = await self.find_profile(user_id)
        if profile is None:
            raise ResourceNotFoundError("Profile", user_id, ErrorContext(user_id=user_id))
        return profile

    # ─── Skills & Interests ──────────────────────────────────────

    async def add_skill(self, user_id: UserId, name: str, level: SkillLevel) -> Skill:
        await require_user(self.store, user_id)
        return await self.store.add_skill(
            user_id, _clean_name(name, "name"), _parse_level(SkillLevel, level),
        )

    async def list_skills(self, user_id: UserId) -> list[Skill]:
        await require_user(self.store, user_id)
        return await self.store.list_skills(user_id)

    async def add_interest(
        self, user_id: UserId, name: str, level: InterestLevel,
    ) -> Interest:
        await require_user(self.store, user_id)
        return await self.store.add_interest(
            user_id, _clean_name(name, "name"), _parse_level(InterestLevel, level),
        )

    async def list_interests(self, user_id: UserId) -> list[Interest]:
        await require_user(self.store, user_id)
        return await self.store.list_interests(user_id)
