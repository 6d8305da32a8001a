"""Partner lookups against the Supabase ``partners`` table."""

from __future__ import annotations

import logging

from ..config import settings
from ..models.domain import CandidateSpot, GeoPoint, SpotKind
from ..services.geospatial import bounding_box, longitude_ranges
from .common import DataAccessError, coerce_coordinate, coerce_text, require_client

logger = logging.getLogger(__name__)


def partner_from_row(row: dict) -> CandidateSpot:
    return CandidateSpot(
        spot_id=str(row["id"]),
        name=coerce_text(row.get("name")) or "",
        kind=SpotKind.PARTNER,
        address=coerce_text(row.get("address")),
        location=GeoPoint(
            latitude=coerce_coordinate(row.get("latitude")),
            longitude=coerce_coordinate(row.get("longitude")),
        ),
        partner_type=coerce_text(row.get("type")),
        raw=row,
    )


def partners_from_rows(rows: list[dict] | None) -> tuple[CandidateSpot, ...]:
    partners: list[CandidateSpot] = []
    for row in rows or []:
        try:
            partners.append(partner_from_row(row))
        except (KeyError, ValueError, TypeError) as e:
            # Skip invalid rows but continue processing
            logger.warning(f"Skipping invalid partner row: {e}")
    return tuple(partners)


def _longitude_filter(ranges: list[tuple[float, float]]) -> str:
    """PostgREST ``or`` expression matching any of the longitude ranges."""

    return ",".join(f"and(longitude.gte.{low},longitude.lte.{high})" for low, high in ranges)


def find_partners_near(center: GeoPoint, radius_km: float) -> tuple[CandidateSpot, ...]:
    """Fetch partners whose coordinates fall inside the box enclosing ``radius_km`` around ``center``."""

    if not center.is_set:
        raise ValueError("A search centre with latitude and longitude is required.")

    lat_min, lat_max, lon_min, lon_max = bounding_box(center, radius_km, settings.km_per_degree)
    ranges = longitude_ranges(lon_min, lon_max)
    supabase = require_client()
    try:
        query = (
            supabase.table(settings.partners_table)
            .select("*")
            .gte("latitude", lat_min)
            .lte("latitude", lat_max)
        )
        if len(ranges) == 1:
            low, high = ranges[0]
            query = query.gte("longitude", low).lte("longitude", high)
        else:
            # box crosses the antimeridian
            query = query.or_(_longitude_filter(ranges))
        response = query.execute()
    except Exception as exc:
        raise DataAccessError(f"Failed to load partners: {exc}", table=settings.partners_table) from exc

    partners = partners_from_rows(response.data)
    logger.debug(f"Loaded {len(partners)} partners within {radius_km:.1f} km of {center}")
    return partners
