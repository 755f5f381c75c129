import logging
from typing import Any

import httpx

from ..settings import settings

logger = logging.getLogger(__name__)

# fixed pollutant readings forwarded to the provider
POLLUTANTS = {"O3": 10, "NO2": 10, "PM": 10}

ERROR_MESSAGE = "Failed to fetch air quality data"


class AirQualityUnavailable(Exception):
    """The air-quality provider could not be reached or returned an error."""

    def __init__(self, message: str = ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class AirQualityService:
    @staticmethod
    def _headers() -> dict[str, str]:
        if not settings.rapidapi_key:
            logger.error("RAPIDAPI_KEY is not configured")
            raise AirQualityUnavailable()

        return {
            "x-rapidapi-key": settings.rapidapi_key,
            "x-rapidapi-host": settings.rapidapi_host,
        }

    @classmethod
    async def _request(cls, client: httpx.AsyncClient) -> Any:
        try:
            response = await client.get(
                settings.air_quality_url,
                params=POLLUTANTS,
                headers=cls._headers(),
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.exception("Air quality request failed: %s", exc)
            raise AirQualityUnavailable() from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.exception("Air quality provider returned invalid JSON: %s", response.text)
            raise AirQualityUnavailable() from exc

    @classmethod
    async def fetch(cls, client: httpx.AsyncClient | None = None) -> Any:
        """Return the provider's JSON body unchanged."""
        if client is not None:
            return await cls._request(client)

        async with httpx.AsyncClient(timeout=settings.air_quality_timeout) as owned:
            return await cls._request(owned)
