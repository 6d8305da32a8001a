"""Nearby spot request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import (
    CandidateSpot,
    ClassifiedSpot,
    GeoPoint,
    ReferenceClassification,
    ReferenceLabel,
    RouteStopSuggestion,
    SpotGroup,
    SpotKind,
)
from ..services.nearby.radius import display_radius_km
from ..services.nearby.service import NearbySpotsResult, SpotListResult


class GeoPointModel(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_domain(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_domain(cls, point: GeoPoint) -> "GeoPointModel":
        return cls(latitude=point.latitude, longitude=point.longitude)


class RouteEndpoints(BaseModel):
    origin: GeoPointModel = Field(default_factory=GeoPointModel)
    destination: GeoPointModel = Field(default_factory=GeoPointModel)


class CandidateSpotModel(BaseModel):
    spot_id: str
    name: str
    kind: SpotKind
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    partner_type: Optional[str] = None
    event_date: Optional[str] = None

    def to_domain(self) -> CandidateSpot:
        return CandidateSpot(
            spot_id=self.spot_id,
            name=self.name,
            kind=self.kind,
            address=self.address,
            location=GeoPoint(latitude=self.latitude, longitude=self.longitude),
            partner_type=self.partner_type,
            event_date=self.event_date,
        )

    @classmethod
    def from_domain(cls, spot: CandidateSpot) -> "CandidateSpotModel":
        return cls(
            spot_id=spot.spot_id,
            name=spot.name,
            kind=spot.kind,
            address=spot.address,
            latitude=spot.location.latitude,
            longitude=spot.location.longitude,
            partner_type=spot.partner_type,
            event_date=spot.event_date,
        )


class ClassifiedSpotModel(CandidateSpotModel):
    reference: ReferenceLabel
    distance_km: float

    def to_classified(self) -> ClassifiedSpot:
        return ClassifiedSpot(
            spot=self.to_domain(),
            classification=ReferenceClassification(label=self.reference, distance_km=self.distance_km),
        )

    @classmethod
    def from_classified(cls, classified: ClassifiedSpot) -> "ClassifiedSpotModel":
        base = CandidateSpotModel.from_domain(classified.spot).model_dump()
        return cls(**base, reference=classified.label, distance_km=classified.distance_km)


class SpotGroupModel(BaseModel):
    reference: ReferenceLabel
    label: str
    items: List[ClassifiedSpotModel]

    @classmethod
    def from_domain(cls, group: SpotGroup) -> "SpotGroupModel":
        return cls(
            reference=group.label,
            label=group.label.display_name,
            items=[ClassifiedSpotModel.from_classified(member) for member in group.members],
        )


class SpotListModel(BaseModel):
    kind: SpotKind
    status: Literal["ok", "error"] = "ok"
    total: int = 0
    error: Optional[str] = None
    groups: List[SpotGroupModel] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: SpotListResult) -> "SpotListModel":
        return cls(
            kind=result.kind,
            status="error" if result.error else "ok",
            total=result.total,
            error=result.error,
            groups=[SpotGroupModel.from_domain(group) for group in result.groups],
        )


class SearchRadiusResponse(BaseModel):
    search_radius_km: float
    display_radius_km: int
    center: GeoPointModel


class NearbySpotsResponse(SearchRadiusResponse):
    searched: bool
    partners: SpotListModel
    events: SpotListModel

    @classmethod
    def from_domain(cls, result: NearbySpotsResult) -> "NearbySpotsResponse":
        return cls(
            search_radius_km=result.search_radius_km,
            display_radius_km=display_radius_km(result.search_radius_km),
            center=GeoPointModel.from_domain(result.center),
            searched=result.searched,
            partners=SpotListModel.from_domain(result.partners),
            events=SpotListModel.from_domain(result.events),
        )


class GroupSpotsRequest(RouteEndpoints):
    spots: List[CandidateSpotModel] = Field(default_factory=list)


class GroupSpotsResponse(BaseModel):
    groups: List[SpotGroupModel]


class RouteStopModel(BaseModel):
    name: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    notes: str
    partner_id: Optional[str] = None

    @classmethod
    def from_domain(cls, stop: RouteStopSuggestion) -> "RouteStopModel":
        return cls(
            name=stop.name,
            address=stop.address,
            latitude=stop.latitude,
            longitude=stop.longitude,
            notes=stop.notes,
            partner_id=stop.partner_id,
        )
