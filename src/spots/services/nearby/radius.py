"""Search radius heuristic for the nearby-spots query."""

from __future__ import annotations

import math

from ...config import settings
from ...models.domain import GeoPoint


def estimate_search_radius_km(
    origin: GeoPoint,
    destination: GeoPoint,
    *,
    default_km: float | None = None,
    km_per_degree: float | None = None,
    damping: float | None = None,
    min_km: float | None = None,
    max_km: float | None = None,
) -> float:
    """Derive a search radius from the straight-line span between origin and destination.

    The span is a flat degree norm scaled to kilometres, not a geodesic
    distance. The damped value is clamped to ``[min_km, max_km]``; a missing
    endpoint yields ``default_km``. Unset arguments fall back to settings.
    """

    default_km = default_km if default_km is not None else settings.default_search_radius_km
    km_per_degree = km_per_degree if km_per_degree is not None else settings.km_per_degree
    damping = damping if damping is not None else settings.search_radius_damping
    min_km = min_km if min_km is not None else settings.min_search_radius_km
    max_km = max_km if max_km is not None else settings.max_search_radius_km

    if not (origin.is_set and destination.is_set):
        return default_km

    d_lat = abs(destination.latitude - origin.latitude)
    d_lon = abs(destination.longitude - origin.longitude)
    span_km = math.hypot(d_lat, d_lon) * km_per_degree
    return max(min_km, min(span_km * damping, max_km))


def display_radius_km(radius_km: float) -> int:
    """Whole-kilometre radius shown as "search radius: ~N km"."""

    return int(math.floor(radius_km + 0.5))
