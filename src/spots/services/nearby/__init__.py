"""Nearby spot classification, grouping and discovery."""

from .classifier import classify_reference
from .grouping import flatten_groups, group_spots
from .radius import display_radius_km, estimate_search_radius_km
from .service import build_route_stop, find_nearby_spots

__all__ = [
    "build_route_stop",
    "classify_reference",
    "display_radius_km",
    "estimate_search_radius_km",
    "find_nearby_spots",
    "flatten_groups",
    "group_spots",
]
