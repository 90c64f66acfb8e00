# dispatcher.py
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from config import Settings
from models import ApiError, FlightTrackingParams

logger = logging.getLogger("fr24.mcp.dispatcher")

FLIGHT_POSITIONS_PATH = "/api/live/flight-positions/light"
FLIGHT_DETAIL_PATH = "/api/flights/detail"
API_VERSION = "v1"


@dataclass(frozen=True)
class ToolResult:
    """Normalized outcome of one upstream call."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, body: Any) -> "ToolResult":
        return cls(text=json.dumps(body, indent=2))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"Flightradar24 API error: {message}", is_error=True)


def _error_message(exc: Exception) -> str:
    """Prefer the upstream error body's message, then the transport error text."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = ApiError.model_validate(exc.response.json())
            if body.message:
                return body.message
        except (ValueError, ValidationError):
            logger.debug("Upstream error body is not a JSON error object")
    return str(exc) or "Unknown error"


class FR24Client:
    """Issues one GET per tool call against the Flightradar24 API."""

    def __init__(
        self,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Accept-Version": API_VERSION,
                "Authorization": f"Bearer {settings.api_key}",
            },
        )

    async def __aenter__(self) -> "FR24Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_flight_positions(self, params: FlightTrackingParams) -> ToolResult:
        """Live positions matching the given filters."""
        return await self._get(FLIGHT_POSITIONS_PATH, params.to_query())

    async def get_flight_eta(self, flight_number: str) -> ToolResult:
        """Departure/arrival ETA details for one flight number."""
        return await self._get(FLIGHT_DETAIL_PATH, {"flight": flight_number, "format": "eta"})

    async def _get(self, path: str, params: Dict[str, Any]) -> ToolResult:
        logger.info("GET %s params=%s", path, params)
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as exc:
            logger.warning("Flightradar24 request timed out: %s", exc)
            return ToolResult.error(str(exc) or "Request timed out")
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Flightradar24 returned HTTP %s for %s", exc.response.status_code, path
            )
            return ToolResult.error(_error_message(exc))
        except httpx.HTTPError as exc:
            logger.warning("Flightradar24 request failed: %s", exc)
            return ToolResult.error(_error_message(exc))
        except ValueError as exc:
            logger.warning("Failed to parse Flightradar24 JSON response: %s", exc)
            return ToolResult.error(f"Invalid JSON response: {exc}")

        return ToolResult.ok(body)
