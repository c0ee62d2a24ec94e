"""Match Routes — ranked exchange partners for a user."""

from fastapi import APIRouter, Depends, Path, Query

from skillswap.api.dependencies import get_matching_engine
from skillswap.schemas.exchange import MatchListEnvelope, MatchResponse
from skillswap.services.matching_engine import MatchingEngine

router = APIRouter(prefix="/api/v1", tags=["matches"])


@router.get("/users/{user_id}/matches", response_model=MatchListEnvelope)
async def suggest_matches(
    user_id: int = Path(gt=0),
    limit: int | None = Query(None, ge=1, le=100),
    engine: MatchingEngine = Depends(get_matching_engine),
):
    suggestions = await engine.suggest_matches(user_id, limit=limit)
    return MatchListEnvelope(
        matches=[MatchResponse.model_validate(s) for s in suggestions],
    )
