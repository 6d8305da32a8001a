"""Nearby spot discovery for a planned route."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Callable

from ...config import settings
from ...data import events_repository, partners_repository
from ...models.domain import (
    UNSET,
    CandidateSpot,
    ClassifiedSpot,
    FetchResult,
    GeoPoint,
    RouteStopSuggestion,
    SpotGroup,
    SpotKind,
)
from ..geospatial import midpoint
from .grouping import group_spots
from .radius import estimate_search_radius_km

logger = logging.getLogger(__name__)

_KIND_NOTES = {
    SpotKind.PARTNER: "Partner",
    SpotKind.EVENT: "Event",
}


@dataclass(slots=True)
class SpotListResult:
    """Grouped spots of one kind, or the reason they could not be loaded."""

    kind: SpotKind
    groups: list[SpotGroup] = field(default_factory=list)
    total: int = 0
    error: str | None = None


@dataclass(slots=True)
class NearbySpotsResult:
    origin: GeoPoint
    destination: GeoPoint
    center: GeoPoint
    search_radius_km: float
    partners: SpotListResult
    events: SpotListResult

    @property
    def searched(self) -> bool:
        return self.center.is_set


def _fetch(kind: SpotKind, loader: Callable[[], tuple[CandidateSpot, ...]]) -> FetchResult:
    started = time.perf_counter()
    try:
        spots = loader()
    except Exception as exc:
        logger.error(f"Error loading nearby {kind.value}s: {exc}", exc_info=True)
        return FetchResult.failure(str(exc))
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(f"Fetched {len(spots)} {kind.value} candidates in {elapsed_ms:.0f} ms")
    return FetchResult.success(spots)


def fetch_candidates(center: GeoPoint, radius_km: float) -> tuple[FetchResult, FetchResult]:
    """Load partners and events concurrently; each failure stays in its own result."""

    timeout = settings.fetch_timeout_seconds
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="nearby-fetch")
    futures = {
        SpotKind.PARTNER: executor.submit(
            _fetch, SpotKind.PARTNER, lambda: partners_repository.find_partners_near(center, radius_km)
        ),
        SpotKind.EVENT: executor.submit(_fetch, SpotKind.EVENT, events_repository.find_upcoming_events),
    }
    results: dict[SpotKind, FetchResult] = {}
    try:
        # one deadline shared by both queries
        _, not_done = wait(futures.values(), timeout=timeout)
        for kind, future in futures.items():
            if future in not_done:
                logger.error(f"Timed out after {timeout}s loading nearby {kind.value}s")
                results[kind] = FetchResult.failure(f"Timed out loading {kind.value}s")
            else:
                results[kind] = future.result()
    finally:
        # a timed-out query is left to finish in the background
        executor.shutdown(wait=False, cancel_futures=True)
    return results[SpotKind.PARTNER], results[SpotKind.EVENT]


def _group_result(kind: SpotKind, fetched: FetchResult, origin: GeoPoint, destination: GeoPoint) -> SpotListResult:
    if not fetched.ok:
        return SpotListResult(kind=kind, error=fetched.error)
    return SpotListResult(
        kind=kind,
        groups=group_spots(fetched.spots, origin, destination),
        total=len(fetched.spots),
    )


def find_nearby_spots(origin: GeoPoint, destination: GeoPoint) -> NearbySpotsResult:
    """Find partners and upcoming events along the route from ``origin`` to ``destination``.

    Nothing is fetched until both endpoints are set; the result then carries
    empty lists and the default radius.
    """

    radius_km = estimate_search_radius_km(origin, destination)
    center = midpoint(origin, destination)

    if not center.is_set:
        return NearbySpotsResult(
            origin=origin,
            destination=destination,
            center=UNSET,
            search_radius_km=radius_km,
            partners=SpotListResult(kind=SpotKind.PARTNER),
            events=SpotListResult(kind=SpotKind.EVENT),
        )

    partners, events = fetch_candidates(center, radius_km)
    return NearbySpotsResult(
        origin=origin,
        destination=destination,
        center=center,
        search_radius_km=radius_km,
        partners=_group_result(SpotKind.PARTNER, partners, origin, destination),
        events=_group_result(SpotKind.EVENT, events, origin, destination),
    )


def build_route_stop(classified: ClassifiedSpot) -> RouteStopSuggestion:
    """Stop payload for adding a classified spot to the route being planned."""

    spot = classified.spot
    notes = f"{_KIND_NOTES[spot.kind]} ({classified.label.display_name}, {classified.distance_km:g} km)"
    if spot.kind is SpotKind.EVENT:
        notes = f"{notes} {spot.event_date[:10] if spot.event_date else 'date TBD'}"
    return RouteStopSuggestion(
        name=spot.name,
        address=spot.address or "",
        latitude=spot.location.latitude,
        longitude=spot.location.longitude,
        notes=notes,
        partner_id=spot.spot_id if spot.kind is SpotKind.PARTNER else None,
    )
