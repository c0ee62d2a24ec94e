"""Demo data tests — seeding is complete and idempotent."""

from skillswap.services.demo_data import DEMO_PASSWORD, seed_demo_data
from skillswap.services.matching_engine import MatchingEngine
from skillswap.services.user_directory import UserDirectory
from skillswap.core.matching import no_jitter


async def test_seed_creates_two_members_with_skills(store):
    created = await seed_demo_data(store)

    assert [u.username for u in created] == ["sarahj", "michaelt"]
    sarah = created[0]
    assert [s.name for s in await store.list_skills(sarah.id)] == ["French"]
    assert [i.name for i in await store.list_interests(sarah.id)] == ["Web Development"]


async def test_seed_is_idempotent(store):
    await seed_demo_data(store)
    assert await seed_demo_data(store) == []
    assert len(await store.list_users()) == 2


async def test_demo_members_can_log_in(store):
    await seed_demo_data(store)
    user = await UserDirectory(store).authenticate_user("michaelt", DEMO_PASSWORD)
    assert user.first_name == "Michael"


async def test_demo_members_see_each_other(store):
    sarah, michael = await seed_demo_data(store)
    suggestions = await MatchingEngine(store, jitter=no_jitter).suggest_matches(sarah.id)
    assert [s.candidate.id for s in suggestions] == [michael.id]
