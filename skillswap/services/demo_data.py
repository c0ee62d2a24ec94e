"""Demo Data — two sample members so a fresh in-memory deployment has someone to match with."""

import logging

from skillswap.core.domain_types import InterestLevel, SkillLevel
from skillswap.core.entities import User
from skillswap.core.repository_protocols import SkillSwapStore
from skillswap.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

DEMO_MEMBERS: tuple[dict, ...] = (
    {
        "account": {
            "username": "sarahj",
            "email": "sarah@example.com",
            "first_name": "Sarah",
            "last_name": "Johnson",
            "location": "New York, USA",
            "timezone": "UTC-5:00 (Eastern Time)",
            "bio": "Language enthusiast and web developer",
        },
        "skills": [("French", SkillLevel.ADVANCED)],
        "interests": [("Web Development", InterestLevel.BEGINNER)],
    },
    {
        "account": {
            "username": "michaelt",
            "email": "michael@example.com",
            "first_name": "Michael",
            "last_name": "Torres",
            "location": "Los Angeles, USA",
            "timezone": "UTC-8:00 (Pacific Time)",
            "bio": "Guitar player and coding enthusiast",
        },
        "skills": [("Guitar", SkillLevel.INTERMEDIATE)],
        "interests": [("Python", InterestLevel.BEGINNER)],
    },
)


async def seed_demo_data(store: SkillSwapStore) -> list[User]:
    """Insert the demo members unless their usernames already exist."""
    directory = UserDirectory(store)
    created = []
    for member in DEMO_MEMBERS:
        account = dict(member["account"])
        if await store.get_user_by_username(account["username"]):
            continue
        user = await directory.register_user(password=DEMO_PASSWORD, **account)
        for name, level in member["skills"]:
            await directory.add_skill(user.id, name, level)
        for name, level in member["interests"]:
            await directory.add_interest(user.id, name, level)
        created.append(user)
    logger.info(f"Seeded {len(created)} demo members")
    return created
