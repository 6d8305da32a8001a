"""Shared helpers for the Supabase-backed repositories."""

from __future__ import annotations

import logging
from typing import Any, Optional

from supabase import Client

from ..db.supabase import get_supabase_client

logger = logging.getLogger(__name__)


class DataAccessError(RuntimeError):
    """Raised when a backend query cannot be completed."""

    def __init__(self, message: str, table: str | None = None) -> None:
        super().__init__(message)
        self.table = table


def require_client() -> Client:
    supabase = get_supabase_client()
    if not supabase:
        raise DataAccessError("Supabase is not configured. Set SPOTS_SUPABASE_URL and SPOTS_SUPABASE_KEY.")
    return supabase


def coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def coerce_coordinate(value: Any) -> Optional[float]:
    """Like coerce_float, but an unparseable coordinate is treated as unset."""
    try:
        return coerce_float(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Ignoring invalid coordinate: {e}")
        return None


def coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
