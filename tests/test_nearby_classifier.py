import pytest

from spots.models.domain import GeoPoint, ReferenceLabel
from spots.services.nearby.classifier import classify_reference, round_distance

TOKYO_STATION = GeoPoint(35.6812, 139.7671)
HAKONE = GeoPoint(35.2323, 139.1069)
UNSET = GeoPoint()


@pytest.mark.parametrize(
    "origin, destination",
    [
        (TOKYO_STATION, HAKONE),
        (TOKYO_STATION, UNSET),
        (UNSET, HAKONE),
        (UNSET, UNSET),
    ],
)
def test_spot_without_coordinates_is_other(origin, destination):
    for spot in (UNSET, GeoPoint(35.4, None), GeoPoint(None, 139.4)):
        result = classify_reference(spot, origin, destination)
        assert result.label is ReferenceLabel.OTHER
        assert result.distance_km == 0


def test_no_reference_points_is_other():
    result = classify_reference(GeoPoint(35.4, 139.4), UNSET, UNSET)

    assert result.label is ReferenceLabel.OTHER
    assert result.distance_km == 0


def test_tokyo_to_hakone_partner_is_near_destination():
    result = classify_reference(GeoPoint(35.4, 139.4), TOKYO_STATION, HAKONE)

    assert result.label is ReferenceLabel.DESTINATION
    assert 25 <= result.distance_km <= 45


def test_single_reference_point_is_used_when_other_missing():
    only_origin = classify_reference(GeoPoint(35.4, 139.4), TOKYO_STATION, UNSET)
    only_destination = classify_reference(GeoPoint(35.6, 139.7), UNSET, HAKONE)

    assert only_origin.label is ReferenceLabel.ORIGIN
    assert only_origin.distance_km > 40
    assert only_destination.label is ReferenceLabel.DESTINATION


def test_equidistant_spot_prefers_origin():
    result = classify_reference(GeoPoint(10.0, 0.0), GeoPoint(10.0, -1.0), GeoPoint(10.0, 1.0))

    assert result.label is ReferenceLabel.ORIGIN


def test_distance_is_rounded_to_one_decimal():
    result = classify_reference(GeoPoint(35.4, 139.4), TOKYO_STATION, HAKONE)

    assert result.distance_km == round(result.distance_km, 1)


def test_round_distance_rounds_half_up():
    assert round_distance(1.25) == 1.3
    assert round_distance(1.24) == 1.2
    assert round_distance(0.04) == 0.0
    assert round_distance(12.0) == 12.0
