# validation.py
import re
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from models import FLIGHT_TRACKING_FIELDS, FlightTrackingParams

logger = logging.getLogger("fr24.mcp.validation")

FLIGHT_NUMBER_RE = re.compile(r"[A-Z0-9]{2,8}")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

INVALID_POSITIONS_PARAMS = (
    "Invalid or missing query parameters. At least one valid parameter is required."
)
INVALID_FLIGHT_NUMBER = "Invalid flight number format"


@dataclass(frozen=True)
class Rejected:
    """A tool call argument bag that failed validation."""

    message: str


def coerce_limit(value: Any) -> Optional[int]:
    """
    Coerce a loosely typed limit to an int.

    Ints pass through, floats are truncated and strings are parsed up to the
    first non-digit ("5" -> 5, " 12 " -> 12). Anything else gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def validate_flight_positions(raw: Any) -> Union[FlightTrackingParams, Rejected]:
    """
    Turn an untyped argument bag into flight position filters.

    Accepted when at least one recognized filter is present: a non-empty
    string, or for `limit` a value coercing to an integer above zero.
    Unrecognized keys and values of the wrong type are dropped.
    """
    if not isinstance(raw, dict):
        return Rejected(INVALID_POSITIONS_PARAMS)

    params = {}
    for field in FLIGHT_TRACKING_FIELDS:
        value = raw.get(field)
        if field == "limit":
            limit = coerce_limit(value)
            if limit is not None and limit > 0:
                params["limit"] = limit
            elif value is not None:
                logger.debug("Dropping non-positive limit: %r", value)
        elif isinstance(value, str) and value:
            params[field] = value

    if not params:
        return Rejected(INVALID_POSITIONS_PARAMS)
    return FlightTrackingParams(**params)


def validate_flight_eta(raw: Any) -> Union[str, Rejected]:
    """Return the flight number from the argument bag if it is 2-8 uppercase alphanumerics."""
    flight_number = raw.get("flightNumber") if isinstance(raw, dict) else None
    flight_number = str(flight_number if flight_number is not None else "")

    if not flight_number or not FLIGHT_NUMBER_RE.fullmatch(flight_number):
        return Rejected(INVALID_FLIGHT_NUMBER)
    return flight_number
