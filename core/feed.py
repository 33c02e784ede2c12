"""
Proximity-ranked job feed.

Postings arrive already filtered to active and ordered newest first by the store.
With a requester coordinate they are re-ordered by great-circle distance; without
one the store order is kept as-is.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from core.models import Coordinate, JobPosting, RankedJobPosting

log = logging.getLogger(__name__)

EARTH_RADIUS_MILES = 3958.8
# Larger than any distance on Earth; pushes postings without coordinates to the end.
SENTINEL_DISTANCE = 999999.0
NEARBY_THRESHOLD_MILES = 0.1


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in miles between two points given in decimal degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Out-of-range latitudes can push a outside [0, 1]; clamp so math.sqrt never raises.
    # max(x, 0.0) keeps a NaN x as NaN.
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(max(a, 0.0)), math.sqrt(max(1 - a, 0.0)))


def posting_distance(posting: JobPosting, requester: Coordinate) -> float:
    """
    Distance from the requester to a posting, or SENTINEL_DISTANCE when it can't be computed.

    Missing coordinates and non-finite results (NaN/inf inputs) both map to the sentinel,
    so those postings keep their relative store order at the end of the feed.
    """
    target = posting.coordinate
    if target is None:
        return SENTINEL_DISTANCE
    # math.sin raises on infinities.
    if not all(math.isfinite(v) for v in (requester.lat, requester.lon, target.lat, target.lon)):
        return SENTINEL_DISTANCE

    distance = haversine_miles(requester.lat, requester.lon, target.lat, target.lon)
    if not math.isfinite(distance):
        return SENTINEL_DISTANCE
    return distance


def build_feed(
    postings: Iterable[JobPosting],
    requester: Optional[Coordinate] = None,
) -> List[RankedJobPosting]:
    """Return postings ready for display, nearest first when a requester coordinate is known."""
    postings = list(postings)

    if requester is None:
        return [RankedJobPosting(posting=p) for p in postings]

    ranked = [RankedJobPosting(posting=p, distance_miles=posting_distance(p, requester)) for p in postings]
    # sorted() is stable: equal distances keep their input order.
    ranked = sorted(ranked, key=lambda r: r.distance_miles)

    located = sum(1 for r in ranked if r.distance_miles < SENTINEL_DISTANCE)
    log.debug("Ranked %d postings by distance (%d without coordinates)", len(ranked), len(ranked) - located)
    return ranked


def has_distance(distance: Optional[float]) -> bool:
    return distance is not None and distance < SENTINEL_DISTANCE


def format_distance(distance: Optional[float]) -> Optional[str]:
    """Human label for a distance; None when there is nothing meaningful to show."""
    if not has_distance(distance):
        return None
    if distance < NEARBY_THRESHOLD_MILES:
        return "less than 0.1 miles"
    return f"{distance:.1f} miles away"


__all__ = [
    "EARTH_RADIUS_MILES",
    "SENTINEL_DISTANCE",
    "haversine_miles",
    "posting_distance",
    "build_feed",
    "has_distance",
    "format_distance",
]
