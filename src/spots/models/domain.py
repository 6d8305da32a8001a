"""Domain models for route reference points and candidate spots."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair where either coordinate may be unset."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_set(self) -> bool:
        return self.latitude is not None and self.longitude is not None


UNSET = GeoPoint()


class SpotKind(str, Enum):
    PARTNER = "partner"
    EVENT = "event"


class ReferenceLabel(str, Enum):
    """Which route reference point a spot is closest to.

    Member order is the display order of the grouped result.
    """

    ORIGIN = "origin"
    DESTINATION = "destination"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ReferenceLabel.ORIGIN: "near origin",
    ReferenceLabel.DESTINATION: "near destination",
    ReferenceLabel.OTHER: "along the route / unclassified",
}


@dataclass(frozen=True, slots=True)
class CandidateSpot:
    """A partner or event returned by the data layer."""

    spot_id: str
    name: str
    kind: SpotKind
    address: Optional[str] = None
    location: GeoPoint = UNSET
    partner_type: Optional[str] = None
    event_date: Optional[str] = None
    raw: dict = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True, slots=True)
class ReferenceClassification:
    label: ReferenceLabel
    distance_km: float


@dataclass(frozen=True, slots=True)
class ClassifiedSpot:
    spot: CandidateSpot
    classification: ReferenceClassification

    @property
    def label(self) -> ReferenceLabel:
        return self.classification.label

    @property
    def distance_km(self) -> float:
        return self.classification.distance_km


@dataclass(frozen=True, slots=True)
class SpotGroup:
    label: ReferenceLabel
    members: tuple[ClassifiedSpot, ...]


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of fetching one candidate list from the backend.

    Exactly one of ``spots`` (success) or ``error`` (failure) is meaningful.
    """

    spots: tuple[CandidateSpot, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, spots) -> "FetchResult":
        return cls(spots=tuple(spots))

    @classmethod
    def failure(cls, message: str) -> "FetchResult":
        return cls(error=message)


@dataclass(slots=True)
class RouteStopSuggestion:
    """Stop payload appended to a route when a nearby spot is added."""

    name: str
    address: str
    latitude: Optional[float]
    longitude: Optional[float]
    notes: str
    partner_id: Optional[str] = None
