import logging

from fastapi import APIRouter

from ..schemas import ActivityInput, FootprintReport
from ..services.footprint import build_report

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["footprint"])


@router.post("/footprint", response_model=FootprintReport)
async def calculate_footprint(payload: ActivityInput) -> FootprintReport:
    report = build_report(payload)
    logger.info(
        "Footprint %.2f t/yr (grade %s)",
        report.result.totalTonnesPerYear,
        report.grade,
    )
    return report
