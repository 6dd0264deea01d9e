"""Distance and price formatting helpers for job listings."""

from __future__ import annotations

import math

EARTH_RADIUS_MILES = 3958.8


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points, in miles, rounded to 0.1."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_MILES * c, 1)


def format_distance(miles: float) -> str:
    if miles < 0.1:
        return "< 0.1 miles"
    text = f"{miles:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} miles"


def format_price(amount: float) -> str:
    """Format *amount* as US dollars, e.g. ``$1,234.50``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
