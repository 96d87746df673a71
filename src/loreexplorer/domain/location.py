"""Saved location domain entity and coordinate formatting."""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

COORDINATE_PLACES = Decimal("0.0001")


@dataclass
class SavedLocation:
    """A location persisted with its AI-generated summary."""

    id: str
    name: str
    summary: str
    created_at: datetime


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format device coordinates as a location query.

    Args:
        latitude: Degrees in [-90, 90]
        longitude: Degrees in [-180, 180]

    Returns:
        "lat, lon" with 4 decimal places, e.g. "48.8584, 2.2945"
    """
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude out of range: {latitude}")
    if not -180 <= longitude <= 180:
        raise ValueError(f"Longitude out of range: {longitude}")
    return f"{_round_coordinate(latitude)}, {_round_coordinate(longitude)}"


def _round_coordinate(value: float) -> str:
    # Ties round away from zero, matching browser toFixed
    return f"{Decimal(value).quantize(COORDINATE_PLACES, rounding=ROUND_HALF_UP):f}"
