"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import UNSET, GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two set points."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    """Arithmetic mean of two points; unset when either input is unset."""

    if not (a.is_set and b.is_set):
        return UNSET
    return GeoPoint(
        latitude=(a.latitude + b.latitude) / 2,
        longitude=(a.longitude + b.longitude) / 2,
    )


def bounding_box(center: GeoPoint, radius_km: float, km_per_degree: float) -> tuple[float, float, float, float]:
    """Return (lat_min, lat_max, lon_min, lon_max) enclosing a radius around ``center``."""

    d_lat = radius_km / km_per_degree
    cos_lat = math.cos(math.radians(center.latitude))
    # near the poles every longitude is within reach
    d_lon = 180.0 if cos_lat < 1e-6 else min(radius_km / (km_per_degree * cos_lat), 180.0)
    return (
        center.latitude - d_lat,
        center.latitude + d_lat,
        center.longitude - d_lon,
        center.longitude + d_lon,
    )


def longitude_ranges(lon_min: float, lon_max: float) -> list[tuple[float, float]]:
    """Split a longitude span into ranges inside [-180, 180].

    A span crossing the antimeridian becomes two ranges, one on each side.
    """

    if lon_max - lon_min >= 360.0:
        return [(-180.0, 180.0)]
    if lon_min < -180.0:
        return [(lon_min + 360.0, 180.0), (-180.0, lon_max)]
    if lon_max > 180.0:
        return [(lon_min, 180.0), (-180.0, lon_max - 360.0)]
    return [(lon_min, lon_max)]
