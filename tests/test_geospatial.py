import pytest

from spots.models.domain import GeoPoint
from spots.services.geospatial import bounding_box, distance_km, haversine_km, longitude_ranges, midpoint

TOKYO_STATION = GeoPoint(35.6812, 139.7671)
OSAKA_STATION = GeoPoint(34.7025, 135.4959)
HAKONE = GeoPoint(35.2323, 139.1069)


def test_haversine_zero_for_coincident_points():
    assert haversine_km(35.6812, 139.7671, 35.6812, 139.7671) == 0.0
    assert distance_km(HAKONE, HAKONE) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        (TOKYO_STATION, OSAKA_STATION),
        (TOKYO_STATION, HAKONE),
        (GeoPoint(-33.87, 151.21), GeoPoint(51.5, -0.12)),
    ],
)
def test_distance_is_symmetric(a: GeoPoint, b: GeoPoint):
    assert distance_km(a, b) == pytest.approx(distance_km(b, a), abs=1e-9)


def test_distance_tokyo_to_osaka():
    assert 395 < distance_km(TOKYO_STATION, OSAKA_STATION) < 410


def test_distance_stable_for_antipodal_points():
    assert distance_km(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0)) == pytest.approx(3.141592653589793 * 6371.0)


def test_midpoint_averages_coordinates():
    center = midpoint(GeoPoint(35.0, 139.0), GeoPoint(36.0, 140.0))

    assert center == GeoPoint(35.5, 139.5)


def test_midpoint_unset_when_either_point_missing():
    assert not midpoint(GeoPoint(35.0, None), HAKONE).is_set
    assert not midpoint(HAKONE, GeoPoint()).is_set


def test_bounding_box_encloses_radius():
    lat_min, lat_max, lon_min, lon_max = bounding_box(TOKYO_STATION, 111.0, 111.0)

    assert lat_min == pytest.approx(34.6812)
    assert lat_max == pytest.approx(36.6812)
    # longitude degrees are shorter away from the equator
    assert lon_max - TOKYO_STATION.longitude > 1.0
    assert TOKYO_STATION.longitude - lon_min == pytest.approx(lon_max - TOKYO_STATION.longitude)


def test_bounding_box_across_antimeridian_reaches_other_side():
    center = GeoPoint(0.0, 179.9)
    across = GeoPoint(0.0, -179.9)
    assert distance_km(center, across) < 50.0

    _, _, lon_min, lon_max = bounding_box(center, 50.0, 111.0)
    ranges = longitude_ranges(lon_min, lon_max)

    assert len(ranges) == 2
    assert any(low <= across.longitude <= high for low, high in ranges)
    assert any(low <= center.longitude <= high for low, high in ranges)
    assert all(-180.0 <= low <= high <= 180.0 for low, high in ranges)


def test_longitude_ranges_wrap_west_of_antimeridian():
    assert longitude_ranges(-180.5, -179.5) == [(179.5, 180.0), (-180.0, -179.5)]


def test_longitude_ranges_inside_bounds_unchanged():
    assert longitude_ranges(139.0, 140.5) == [(139.0, 140.5)]


def test_longitude_ranges_full_circle():
    assert longitude_ranges(-200.0, 200.0) == [(-180.0, 180.0)]
