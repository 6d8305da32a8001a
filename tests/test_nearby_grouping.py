import random

from spots.models.domain import CandidateSpot, GeoPoint, ReferenceLabel, SpotKind
from spots.services.nearby.grouping import flatten_groups, group_spots

ORIGIN = GeoPoint(35.6812, 139.7671)
DESTINATION = GeoPoint(35.2323, 139.1069)


def _partner(pid: str, lat: float | None, lon: float | None) -> CandidateSpot:
    return CandidateSpot(
        spot_id=pid,
        name=f"Partner {pid}",
        kind=SpotKind.PARTNER,
        address="Somewhere",
        location=GeoPoint(lat, lon),
        partner_type="RVPark",
    )


def _sample_spots() -> list[CandidateSpot]:
    spots = [
        _partner("near-origin-far", 35.60, 139.60),
        _partner("near-origin-close", 35.68, 139.76),
        _partner("near-dest-far", 35.30, 139.30),
        _partner("near-dest-close", 35.24, 139.11),
        _partner("no-coords", None, None),
        _partner("half-coords", 35.5, None),
    ]
    rng = random.Random(7)
    rng.shuffle(spots)
    return spots


def test_groups_in_fixed_order_sorted_by_distance():
    groups = group_spots(_sample_spots(), ORIGIN, DESTINATION)

    assert [group.label for group in groups] == [
        ReferenceLabel.ORIGIN,
        ReferenceLabel.DESTINATION,
        ReferenceLabel.OTHER,
    ]
    assert [m.spot.spot_id for m in groups[0].members] == ["near-origin-close", "near-origin-far"]
    assert [m.spot.spot_id for m in groups[1].members] == ["near-dest-close", "near-dest-far"]
    assert {m.spot.spot_id for m in groups[2].members} == {"no-coords", "half-coords"}
    for group in groups:
        distances = [member.distance_km for member in group.members]
        assert distances == sorted(distances)


def test_groups_partition_input_exactly():
    spots = _sample_spots()
    members = flatten_groups(group_spots(spots, ORIGIN, DESTINATION))

    assert len(members) == len(spots)
    assert {member.spot.spot_id for member in members} == {spot.spot_id for spot in spots}


def test_empty_groups_are_omitted():
    spots = [_partner("a", 35.68, 139.76), _partner("b", 35.60, 139.60)]

    groups = group_spots(spots, ORIGIN, DESTINATION)

    assert len(groups) == 1
    assert groups[0].label is ReferenceLabel.ORIGIN


def test_unset_route_puts_everything_in_other_preserving_order():
    spots = [_partner("p1", 35.6, 139.6), _partner("p2", 35.3, 139.3), _partner("p3", 35.4, 139.4)]

    groups = group_spots(spots, GeoPoint(), GeoPoint())

    assert len(groups) == 1
    assert groups[0].label is ReferenceLabel.OTHER
    assert groups[0].label.display_name == "along the route / unclassified"
    assert [m.spot.spot_id for m in groups[0].members] == ["p1", "p2", "p3"]
    assert all(member.distance_km == 0 for member in groups[0].members)


def test_empty_input_returns_no_groups():
    assert group_spots([], ORIGIN, DESTINATION) == []
