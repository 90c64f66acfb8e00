"""Unit tests for Flightradar24 payload models."""

import pytest
from pydantic import ValidationError

from models import (
    FLIGHT_TRACKING_FIELDS,
    FlightCategory,
    FlightETAResponse,
    FlightPositionsResponse,
    FlightTrackingParams,
)


class TestFlightTrackingParams:
    """Tests for FlightTrackingParams."""

    def test_to_query_skips_unset_fields(self) -> None:
        params = FlightTrackingParams(airports="KJFK", limit=5)
        assert params.to_query() == {"airports": "KJFK", "limit": 5}

    def test_limit_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FlightTrackingParams(limit=0)

    def test_recognized_fields(self) -> None:
        assert len(FLIGHT_TRACKING_FIELDS) == 15
        assert FLIGHT_TRACKING_FIELDS[-1] == "limit"


class TestPayloads:
    """Tests for response payload models."""

    def test_positions_response(self) -> None:
        resp = FlightPositionsResponse.model_validate(
            {
                "data": [
                    {
                        "fr24_id": "321a0cc3",
                        "lat": 40.6,
                        "lon": -73.7,
                        "timestamp": "2024-05-03T19:40:00Z",
                        "source": "MLAT",
                    }
                ]
            }
        )
        assert resp.data[0].source == "MLAT"

    def test_position_source_is_restricted(self) -> None:
        with pytest.raises(ValidationError):
            FlightPositionsResponse.model_validate(
                {"data": [{"fr24_id": "x", "lat": 0, "lon": 0, "timestamp": "t", "source": "RADAR"}]}
            )

    def test_eta_response(self) -> None:
        resp = FlightETAResponse.model_validate(
            {
                "data": {
                    "flight_number": "UA123",
                    "departure": {"airport": "KJFK", "scheduled": "18:00", "actual": "18:12", "delay": 12},
                    "arrival": {"airport": "KLAX", "scheduled": "21:10", "estimated": "21:05"},
                    "status": "landed",
                }
            }
        )
        assert resp.data.departure.delay == 12
        assert resp.data.arrival.delay is None

    def test_eta_status_is_restricted(self) -> None:
        with pytest.raises(ValidationError):
            FlightETAResponse.model_validate(
                {
                    "data": {
                        "flight_number": "UA123",
                        "departure": {"airport": "KJFK", "scheduled": "18:00"},
                        "arrival": {"airport": "KLAX", "scheduled": "21:10"},
                        "status": "diverted",
                    }
                }
            )


def test_flight_category_codes():
    assert FlightCategory("P") is FlightCategory.PASSENGER
    assert FlightCategory.NON_CATEGORIZED.value == "N"
    assert len(FlightCategory) == 12
