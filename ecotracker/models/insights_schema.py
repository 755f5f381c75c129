from typing import List

from pydantic import BaseModel


class Recommendation(BaseModel):
    title: str
    description: str
    impact: str


class RecommendationsResponse(BaseModel):
    recommendations: List[Recommendation]


class LeaderboardEntry(BaseModel):
    rank: int
    name: str
    score: float
    badge: str


class LeaderboardResponse(BaseModel):
    entries: List[LeaderboardEntry]
