"""Group candidate spots into origin / destination / other sections."""

from __future__ import annotations

from typing import Iterable

from ...models.domain import CandidateSpot, ClassifiedSpot, GeoPoint, ReferenceLabel, SpotGroup
from .classifier import classify_reference


def classify_spots(
    spots: Iterable[CandidateSpot], origin: GeoPoint, destination: GeoPoint
) -> list[ClassifiedSpot]:
    return [
        ClassifiedSpot(spot=spot, classification=classify_reference(spot.location, origin, destination))
        for spot in spots
    ]


def group_spots(spots: Iterable[CandidateSpot], origin: GeoPoint, destination: GeoPoint) -> list[SpotGroup]:
    """Partition ``spots`` by nearest reference point, each group sorted by distance.

    Groups come out in ReferenceLabel order and empty groups are omitted.
    """

    buckets: dict[ReferenceLabel, list[ClassifiedSpot]] = {label: [] for label in ReferenceLabel}
    for classified in classify_spots(spots, origin, destination):
        buckets[classified.label].append(classified)

    groups: list[SpotGroup] = []
    for label in ReferenceLabel:
        members = buckets[label]
        if not members:
            continue
        members.sort(key=lambda item: item.distance_km)
        groups.append(SpotGroup(label=label, members=tuple(members)))
    return groups


def flatten_groups(groups: Iterable[SpotGroup]) -> list[ClassifiedSpot]:
    """Members of every group in display order."""

    return [member for group in groups for member in group.members]
