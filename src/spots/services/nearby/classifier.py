"""Classify a spot by the route reference point it is closest to."""

from __future__ import annotations

import math

from ...models.domain import GeoPoint, ReferenceClassification, ReferenceLabel
from ..geospatial import distance_km

UNCLASSIFIED = ReferenceClassification(label=ReferenceLabel.OTHER, distance_km=0.0)


def round_distance(km: float) -> float:
    """Round to one decimal place, halves rounding up."""

    return math.floor(km * 10 + 0.5) / 10


def classify_reference(spot: GeoPoint, origin: GeoPoint, destination: GeoPoint) -> ReferenceClassification:
    """Label ``spot`` with the nearer of origin/destination and its distance.

    Spots without coordinates, or with neither reference point set, are
    ``other`` at distance 0. Equal distances resolve to the origin.
    """

    if not spot.is_set:
        return UNCLASSIFIED

    candidates: list[tuple[ReferenceLabel, float]] = []
    if origin.is_set:
        candidates.append((ReferenceLabel.ORIGIN, distance_km(spot, origin)))
    if destination.is_set:
        candidates.append((ReferenceLabel.DESTINATION, distance_km(spot, destination)))

    if not candidates:
        return UNCLASSIFIED

    # min() keeps the first of equal values, so origin wins ties
    label, km = min(candidates, key=lambda item: item[1])
    return ReferenceClassification(label=label, distance_km=round_distance(km))
