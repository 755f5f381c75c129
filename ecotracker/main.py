import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routes.air_quality import router as air_quality_router
from .routes.footprint import router as footprint_router
from .routes.insights import router as insights_router
from .services.air_quality import AirQualityUnavailable
from .services.footprint import InvalidInput

logger = logging.getLogger(__name__)

app = FastAPI(
    title="EcoTracker",
    version="1.0.0",
    description="Estimates an annual carbon footprint from lifestyle activity data.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning("Rejected activity input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"error": exc.message, "field": exc.field})


@app.exception_handler(AirQualityUnavailable)
async def air_quality_handler(request: Request, exc: AirQualityUnavailable) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.get("/health")
async def health():
    return {"status": "ok", "service": "ecotracker"}


app.include_router(footprint_router)
app.include_router(insights_router)
app.include_router(air_quality_router)
