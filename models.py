# models.py
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlightCategory(str, Enum):
    """Single-letter aircraft category codes accepted by the `categories` filter."""

    PASSENGER = "P"
    CARGO = "C"
    MILITARY_AND_GOVERNMENT = "M"
    BUSINESS_JETS = "J"
    GENERAL_AVIATION = "T"
    HELICOPTERS = "H"
    LIGHTER_THAN_AIR = "B"
    GLIDERS = "G"
    DRONES = "D"
    GROUND_VEHICLES = "V"
    OTHER = "O"
    NON_CATEGORIZED = "N"


class FlightTrackingParams(BaseModel):
    """Query filters for the live flight positions endpoint."""

    bounds: Optional[str] = Field(default=None, description="lat1,lon1,lat2,lon2")
    flights: Optional[str] = None
    callsigns: Optional[str] = None
    registrations: Optional[str] = None
    painted_as: Optional[str] = None
    operating_as: Optional[str] = None
    airports: Optional[str] = Field(default=None, description="Comma-separated airport codes")
    routes: Optional[str] = None
    aircraft: Optional[str] = None
    altitude_ranges: Optional[str] = None
    squawks: Optional[str] = None
    categories: Optional[str] = Field(default=None, description="Category codes, e.g. P,C,J")
    data_sources: Optional[str] = None
    airspaces: Optional[str] = None
    limit: Optional[int] = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_query(self) -> Dict[str, Any]:
        """Return only the filters that are set, ready to use as query parameters."""
        return self.model_dump(exclude_none=True)


# Every field name the positions endpoint recognizes, in declaration order
FLIGHT_TRACKING_FIELDS = tuple(FlightTrackingParams.model_fields)


class FlightPosition(BaseModel):
    """One aircraft position report from the live feed."""

    fr24_id: str
    hex: Optional[str] = None
    callsign: Optional[str] = None
    lat: float
    lon: float
    track: Optional[float] = None
    alt: Optional[float] = None
    gspeed: Optional[float] = None
    vspeed: Optional[float] = None
    squawk: Optional[str] = None
    timestamp: str
    source: Literal["ADSB", "MLAT", "ESTIMATED"]

    model_config = ConfigDict(frozen=True, extra="ignore")


class FlightPositionsResponse(BaseModel):
    data: List[FlightPosition] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")


class DepartureLeg(BaseModel):
    airport: str
    scheduled: str
    actual: Optional[str] = None
    delay: Optional[int] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class ArrivalLeg(BaseModel):
    airport: str
    scheduled: str
    estimated: Optional[str] = None
    delay: Optional[int] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class FlightETA(BaseModel):
    """Departure/arrival timing for one flight."""

    flight_number: str
    departure: DepartureLeg
    arrival: ArrivalLeg
    status: Literal["scheduled", "active", "landed", "cancelled"]

    model_config = ConfigDict(frozen=True, extra="ignore")


class FlightETAResponse(BaseModel):
    data: FlightETA

    model_config = ConfigDict(frozen=True, extra="ignore")


class ApiError(BaseModel):
    """Error body returned by the Flightradar24 API."""

    code: Optional[Any] = None
    message: Optional[str] = None
    details: Optional[Any] = None

    model_config = ConfigDict(extra="ignore")
