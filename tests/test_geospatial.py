"""Tests for Haversine distances and geofence verdicts."""

from collections import namedtuple

import numpy as np
import pytest

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import GeoPoint
from survey_core.scripts.geospatial import (
    calculate_coverage_area,
    calculate_haversine_distance,
    calculate_haversine_distances,
    format_coordinates,
    to_geo_point,
    validate_coordinates,
    validate_geofence,
)

LatLng = namedtuple("LatLng", ["lat", "lng"])


class TestValidateCoordinates:
    @pytest.mark.parametrize(
        "lat,lng", [(0, 0), (90, 180), (-90, -180), (-23.55, -46.63)]
    )
    def test_valid(self, lat, lng):
        result = validate_coordinates(lat, lng)
        assert result.is_valid is True
        assert result.errors == []

    def test_invalid_latitude(self):
        result = validate_coordinates(90.0001, 10)
        assert result.is_valid is False
        assert len(result.errors) == 1
        assert "Latitude" in result.errors[0]

    def test_both_invalid(self):
        result = validate_coordinates(-91, 181)
        assert result.is_valid is False
        assert len(result.errors) == 2

    @pytest.mark.parametrize(
        "lat,lng", [("12.5", 0), (0, None), (True, 0), (float("nan"), 0)]
    )
    def test_non_numeric_reported_not_raised(self, lat, lng):
        result = validate_coordinates(lat, lng)
        assert result.is_valid is False
        assert len(result.errors) == 1


class TestToGeoPoint:
    def test_accepted_shapes(self):
        expected = GeoPoint(lat=1.5, lng=2.5)
        assert to_geo_point((1.5, 2.5)) == expected
        assert to_geo_point(LatLng(1.5, 2.5)) == expected
        assert to_geo_point({"lat": 1.5, "lng": 2.5}) == expected
        assert to_geo_point(expected) is expected

    def test_mapping_keeps_accuracy(self):
        point = to_geo_point({"lat": 1, "lng": 2, "accuracy": 8.0, "timestamp": 10})
        assert point.accuracy == 8.0
        assert point.timestamp == 10

    @pytest.mark.parametrize(
        "point",
        [{"lat": 1}, "north", (1, 2, 3), None, ("a", "b"), {"lat": "1", "lng": 2}],
    )
    def test_unreadable(self, point):
        with pytest.raises(InvalidParameter):
            to_geo_point(point)


class TestHaversineDistance:
    def test_thousandth_degree_at_equator(self):
        distance = calculate_haversine_distance((0, 0), (0.001, 0))
        assert distance == pytest.approx(111.19, abs=0.01)

    def test_known_city_distance(self):
        # Sao Paulo to Rio de Janeiro, about 360 km
        distance = calculate_haversine_distance((-23.5505, -46.6333), (-22.9068, -43.1729))
        assert 355_000 < distance < 365_000

    def test_reflexive(self, area_center):
        assert calculate_haversine_distance(area_center, area_center) == 0

    @pytest.mark.parametrize(
        "a,b",
        [
            ((0, 0), (10, 10)),
            ((-23.5, -46.6), (40.7, -74.0)),
            ((89.9, 179.9), (-89.9, -179.9)),
            ((0, 0), (0, 180)),
        ],
    )
    def test_symmetric(self, a, b):
        assert calculate_haversine_distance(a, b) == calculate_haversine_distance(b, a)

    def test_antipodal(self):
        distance = calculate_haversine_distance((0, 0), (0, 180))
        assert distance == pytest.approx(np.pi * 6371000, abs=0.01)

    def test_rounded_to_two_decimals(self):
        distance = calculate_haversine_distance((0, 0), (0.0001234, 0.0004321))
        assert distance == round(distance, 2)

    @pytest.mark.parametrize("bad", [(91, 0), (0, -181), (-90.5, 10)])
    def test_invalid_point_rejected(self, bad):
        with pytest.raises(InvalidParameter):
            calculate_haversine_distance(bad, (0, 0))
        with pytest.raises(InvalidParameter):
            calculate_haversine_distance((0, 0), bad)

    def test_non_numeric_point_rejected(self):
        with pytest.raises(InvalidParameter):
            calculate_haversine_distance(("a", "b"), (0, 0))

    def test_batch_matches_scalar(self, area_center):
        points = [(-23.5510, -46.6340), (-23.5400, -46.6300), area_center]
        distances = calculate_haversine_distances(points, area_center)
        expected = [calculate_haversine_distance(p, area_center) for p in points]
        np.testing.assert_allclose(distances, expected)

    def test_batch_empty(self, area_center):
        assert calculate_haversine_distances([], area_center).size == 0

    def test_batch_rejects_invalid(self, area_center):
        with pytest.raises(InvalidParameter):
            calculate_haversine_distances([(0, 0), (100, 0)], area_center)


class TestValidateGeofence:
    def test_inside(self, area_center):
        verdict = validate_geofence((-23.5510, -46.6335), area_center)
        assert verdict.is_valid is True
        assert verdict.max_allowed_distance == 100
        assert verdict.distance_from_center < 100
        assert verdict.area_center == area_center

    def test_outside(self, area_center):
        verdict = validate_geofence((-23.5600, -46.6333), area_center, max_distance=500)
        assert verdict.is_valid is False
        assert verdict.distance_from_center > 500

    def test_boundary_is_inclusive(self):
        here, center = (0.0, 0.0), (0.001, 0.0)
        distance = calculate_haversine_distance(here, center)

        assert validate_geofence(here, center, max_distance=distance).is_valid is True
        assert validate_geofence(here, center, max_distance=distance - 0.01).is_valid is False

    def test_verdict_matches_distance(self, area_center):
        for radius in [0, 10, 50, 100, 1000]:
            verdict = validate_geofence((-23.5507, -46.6340), area_center, radius)
            assert verdict.is_valid == (
                verdict.distance_from_center <= verdict.max_allowed_distance
            )

    def test_independent_calls(self, area_center):
        """Repeated checks do not influence each other."""
        far = (-23.6, -46.7)
        near = (-23.55053, -46.63331)
        first = validate_geofence(near, area_center)
        validate_geofence(far, area_center)
        assert validate_geofence(near, area_center) == first

    def test_invalid_location(self, area_center):
        with pytest.raises(InvalidParameter):
            validate_geofence((120, 0), area_center)

    def test_negative_radius(self, area_center):
        with pytest.raises(InvalidParameter):
            validate_geofence(area_center, area_center, max_distance=-1)

    def test_to_dict(self, area_center):
        data = validate_geofence(area_center, area_center).to_dict()
        assert data == {
            "is_valid": True,
            "distance_from_center": 0.0,
            "max_allowed_distance": 100,
        }


class TestCoverageArea:
    def test_equator(self):
        box = calculate_coverage_area((0, 0), 111.19492664455873)
        assert box.north == pytest.approx(0.001)
        assert box.south == pytest.approx(-0.001)
        assert box.east == pytest.approx(0.001)
        assert box.west == pytest.approx(-0.001)

    def test_longitude_widens_with_latitude(self):
        box = calculate_coverage_area((60, 10), 1000)
        assert (box.east - box.west) == pytest.approx(2 * (box.north - box.south), rel=1e-6)

    def test_negative_radius(self):
        with pytest.raises(InvalidParameter):
            calculate_coverage_area((0, 0), -5)


class TestFormatCoordinates:
    def test_hemispheres(self):
        assert format_coordinates(12.345678, -98.765432) == "12.345678°N, 98.765432°W"
        assert format_coordinates(-23.55052, 46.633308) == "23.550520°S, 46.633308°E"

    def test_accuracy_suffix(self):
        assert format_coordinates(0, 0, accuracy=4.6) == "0.000000°N, 0.000000°E (±5m)"
