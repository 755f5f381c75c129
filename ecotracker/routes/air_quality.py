from typing import Any

from fastapi import APIRouter

from ..services.air_quality import AirQualityService

router = APIRouter(prefix="/api", tags=["air-quality"])


@router.get("/air-quality")
async def air_quality() -> Any:
    return await AirQualityService.fetch()
