"""Upcoming event lookups against the Supabase ``events`` table."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ..config import settings
from ..models.domain import CandidateSpot, GeoPoint, SpotKind
from .common import DataAccessError, coerce_coordinate, coerce_text, require_client

logger = logging.getLogger(__name__)


def event_from_row(row: dict) -> CandidateSpot:
    # coordinates are optional columns on events
    return CandidateSpot(
        spot_id=str(row["id"]),
        name=coerce_text(row.get("title")) or "",
        kind=SpotKind.EVENT,
        address=coerce_text(row.get("location")),
        location=GeoPoint(
            latitude=coerce_coordinate(row.get("latitude")),
            longitude=coerce_coordinate(row.get("longitude")),
        ),
        event_date=coerce_text(row.get("event_date")),
        raw=row,
    )


def events_from_rows(rows: list[dict] | None) -> tuple[CandidateSpot, ...]:
    events: list[CandidateSpot] = []
    for row in rows or []:
        try:
            events.append(event_from_row(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid event row: {e}")
    return tuple(events)


def find_upcoming_events(limit: int | None = None, now: datetime | None = None) -> tuple[CandidateSpot, ...]:
    """Fetch events with the upcoming status scheduled after ``now``, soonest first."""

    now = now or datetime.now(timezone.utc)
    supabase = require_client()
    try:
        response = (
            supabase.table(settings.events_table)
            .select("*")
            .eq("status", settings.upcoming_event_status)
            .gt("event_date", now.isoformat())
            .order("event_date")
            .limit(limit or settings.event_fetch_limit)
            .execute()
        )
    except Exception as exc:
        raise DataAccessError(f"Failed to load events: {exc}", table=settings.events_table) from exc

    events = events_from_rows(response.data)
    logger.debug(f"Loaded {len(events)} upcoming events")
    return events
