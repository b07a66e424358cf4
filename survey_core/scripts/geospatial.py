"""Geofence validation.

Distances are great-circle distances on a spherical Earth (Haversine),
never planar approximations.
"""

import logging
import math
from typing import Any, Iterable, Optional

import numpy as np

from survey_core.errors import InvalidParameter
from survey_core.sampling.types import (
    BoundingBox,
    CoordinateValidation,
    GeofenceVerdict,
    GeoPoint,
)
from survey_core.scripts.calc_utils import is_number
from survey_core.scripts.parameter import (
    default_geofence_radius_m,
    earth_radius_m,
    latitude_range,
    longitude_range,
)

logger = logging.getLogger("survey_core.scripts.geospatial")


def validate_coordinates(lat: float, lng: float) -> CoordinateValidation:
    """Check that a latitude/longitude pair is within the WGS84 ranges.

    Args:
        lat: Latitude in degrees
        lng: Longitude in degrees

    Returns:
        CoordinateValidation with one error message per offending value
    """
    errors = []
    for label, value, (low, high) in (
        ("Latitude", lat, latitude_range),
        ("Longitude", lng, longitude_range),
    ):
        if not is_number(value):
            errors.append(f"{label} must be a number, got {value!r}")
        elif not low <= value <= high:
            errors.append(f"{label} must be between {low:g} and {high:g}, got {value}")
    return CoordinateValidation(is_valid=not errors, errors=errors)


def to_geo_point(point: Any) -> GeoPoint:
    """Convert a point to a validated GeoPoint.

    Accepts a GeoPoint, any object with lat/lng attributes, a mapping with
    lat/lng keys or a (lat, lng) pair.

    Raises:
        InvalidParameter: If the point cannot be read or is out of range
    """
    if isinstance(point, GeoPoint):
        geo_point = point
    elif hasattr(point, "lat") and hasattr(point, "lng"):
        geo_point = GeoPoint(lat=point.lat, lng=point.lng)
    elif isinstance(point, dict):
        try:
            geo_point = GeoPoint(
                lat=point["lat"],
                lng=point["lng"],
                accuracy=point.get("accuracy"),
                timestamp=point.get("timestamp"),
            )
        except KeyError as e:
            raise InvalidParameter(f"Point is missing {e}") from e
    else:
        try:
            lat, lng = point
        except (TypeError, ValueError) as e:
            raise InvalidParameter(f"Cannot read coordinates from {point!r}") from e
        geo_point = GeoPoint(lat=lat, lng=lng)

    validation = validate_coordinates(geo_point.lat, geo_point.lng)
    if not validation.is_valid:
        raise InvalidParameter("; ".join(validation.errors))
    return geo_point


def _haversine(lat1, lng1, lat2, lng2):
    lat1, lng1, lat2, lng2 = map(np.radians, (lat1, lng1, lat2, lng2))
    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlng / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return earth_radius_m * c


def calculate_haversine_distance(point_a: Any, point_b: Any) -> float:
    """Calculate the great-circle distance between two points.

    Formula:
        a = sin²(Δφ/2) + cos φ1 x cos φ2 x sin²(Δλ/2)
        c = 2 x atan2(√a, √(1 - a))
        d = R x c

    Args:
        point_a: First point
        point_b: Second point

    Returns:
        Distance in meters, rounded to 2 decimals

    Raises:
        InvalidParameter: If either point has out-of-range coordinates
    """
    a = to_geo_point(point_a)
    b = to_geo_point(point_b)
    return float(np.round(_haversine(a.lat, a.lng, b.lat, b.lng), 2))


def calculate_haversine_distances(points: Iterable[Any], center: Any) -> np.ndarray:
    """Calculate the distance of each point to a center, in meters (2 decimals)."""
    center = to_geo_point(center)
    geo_points = [to_geo_point(p) for p in points]
    if not geo_points:
        return np.array([], dtype=float)

    lats = np.array([p.lat for p in geo_points], dtype=float)
    lngs = np.array([p.lng for p in geo_points], dtype=float)
    distances = _haversine(lats, lngs, center.lat, center.lng)
    return np.round(distances, 2)


def validate_geofence(
    current_location: Any,
    area_center: Any,
    max_distance: float = default_geofence_radius_m,
) -> GeofenceVerdict:
    """Check whether a location lies within the collection radius of an area.

    Each call is independent: there is no smoothing across calls.

    Args:
        current_location: Position of the researcher
        area_center: Center of the survey area
        max_distance: Allowed radius in meters

    Returns:
        GeofenceVerdict, valid when the distance is <= max_distance

    Raises:
        InvalidParameter: If a point is out of range or max_distance is negative
    """
    if max_distance is None or max_distance < 0:
        raise InvalidParameter(
            f"Maximum distance must not be negative, got {max_distance}"
        )
    current = to_geo_point(current_location)
    center = to_geo_point(area_center)

    distance = calculate_haversine_distance(current, center)
    is_valid = distance <= max_distance
    logger.debug(
        f"Geofence check: {distance} m from center, limit {max_distance} m, "
        f"valid={is_valid}"
    )

    return GeofenceVerdict(
        is_valid=is_valid,
        distance_from_center=distance,
        max_allowed_distance=max_distance,
        current_location=current,
        area_center=center,
    )


def calculate_coverage_area(center: Any, radius_meters: float) -> BoundingBox:
    """Approximate the lat/lng extent of a circle around a point.

    Uses the small-angle conversion of meters to degrees, the longitude
    extent widening with latitude.
    """
    if radius_meters < 0:
        raise InvalidParameter(f"Radius must not be negative, got {radius_meters}")
    center = to_geo_point(center)

    lat_delta = math.degrees(radius_meters / earth_radius_m)
    lng_delta = lat_delta / math.cos(math.radians(center.lat))

    return BoundingBox(
        north=center.lat + lat_delta,
        south=center.lat - lat_delta,
        east=center.lng + lng_delta,
        west=center.lng - lng_delta,
    )


def format_coordinates(lat: float, lng: float, accuracy: Optional[float] = None) -> str:
    """Format coordinates for display, e.g. ``12.345678°N, 98.765432°W``."""
    lat_dir = "N" if lat >= 0 else "S"
    lng_dir = "E" if lng >= 0 else "W"
    text = f"{abs(lat):.6f}°{lat_dir}, {abs(lng):.6f}°{lng_dir}"
    if accuracy is not None:
        text += f" (±{accuracy:.0f}m)"
    return text
