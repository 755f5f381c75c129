from fastapi import APIRouter

from ..models.insights_schema import LeaderboardResponse, RecommendationsResponse
from ..services.insights import get_leaderboard, get_recommendations

router = APIRouter(prefix="/api", tags=["insights"])


@router.get("/recommendations", response_model=RecommendationsResponse)
async def recommendations() -> RecommendationsResponse:
    return get_recommendations()


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def leaderboard() -> LeaderboardResponse:
    return get_leaderboard()
