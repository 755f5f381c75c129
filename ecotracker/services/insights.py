"""Static recommendations and sample leaderboard shown after a calculation."""
from ..models.insights_schema import (
    LeaderboardEntry,
    LeaderboardResponse,
    Recommendation,
    RecommendationsResponse,
)

RECOMMENDATIONS = (
    Recommendation(
        title="Switch to Electric Vehicle",
        description="Consider switching to an electric vehicle to reduce emissions by up to 50%",
        impact="High Impact",
    ),
    Recommendation(
        title="Plant Trees",
        description="Participate in local tree planting initiatives or donate to reforestation projects",
        impact="Medium Impact",
    ),
    Recommendation(
        title="Renewable Energy",
        description="Switch to a renewable energy provider for your home electricity",
        impact="High Impact",
    ),
)

# sample data, scores in tonnes CO2e per year
LEADERBOARD = (
    LeaderboardEntry(rank=1, name="Sarah Johnson", score=2.1, badge="Eco-Warrior"),
    LeaderboardEntry(rank=2, name="Michael Chen", score=2.4, badge="Eco-Warrior"),
    LeaderboardEntry(rank=3, name="Emma Wilson", score=2.8, badge="Eco-Warrior"),
    LeaderboardEntry(rank=4, name="David Kim", score=3.2, badge="Eco-Warrior"),
    LeaderboardEntry(rank=5, name="Lisa Garcia", score=3.5, badge="Eco-Warrior"),
)


def get_recommendations() -> RecommendationsResponse:
    return RecommendationsResponse(recommendations=list(RECOMMENDATIONS))


def get_leaderboard() -> LeaderboardResponse:
    return LeaderboardResponse(entries=list(LEADERBOARD))
