"""
Spherical geometry on the unit sphere.

All angles are radians. Latitude is in [-pi/2, pi/2], longitude in [-pi, pi].
Degrees only appear at the public boundary (grid.py).
"""
import math
from typing import NamedTuple, Tuple

# Threshold below which two angles or distances are treated as equal
EPSILON = 1e-10

# Mean earth radius (authalic), used only for km conversions
EARTH_RADIUS_KM = 6371.007180918475

M_2PI = 2.0 * math.pi


class Vec3d(NamedTuple):
    """Point in 3D cartesian space; on the unit sphere for geographic points."""
    x: float
    y: float
    z: float


def to_unit_vector(lat: float, lng: float) -> Vec3d:
    """
    Convert a geographic point to a unit vector.

    Args:
        lat: Latitude in radians
        lng: Longitude in radians

    Returns:
        Vec3d with x toward (0, 0), y toward (0, 90E) and z toward the north pole
    """
    r = math.cos(lat)
    return Vec3d(math.cos(lng) * r, math.sin(lng) * r, math.sin(lat))


def to_geo_point(v: Vec3d) -> Tuple[float, float]:
    """Inverse of to_unit_vector. Returns (lat, lng) in radians."""
    lat = math.atan2(v.z, math.sqrt(v.x * v.x + v.y * v.y))
    lng = math.atan2(v.y, v.x)
    return lat, lng


def point_square_dist(v1: Vec3d, v2: Vec3d) -> float:
    """Squared euclidean (chord) distance between two 3D points."""
    dx = v1.x - v2.x
    dy = v1.y - v2.y
    dz = v1.z - v2.z
    return dx * dx + dy * dy + dz * dz


def great_circle_distance_squared(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Haversine-derived squared distance between two points.

    The return value is 2 * sin^2(d / 2), which equals 1 - cos(d) for the
    central angle d, so acos(1 - value) recovers the angle.
    """
    sin_dlat = math.sin((lat2 - lat1) * 0.5)
    sin_dlng = math.sin((lng2 - lng1) * 0.5)
    a = sin_dlat * sin_dlat + math.cos(lat1) * math.cos(lat2) * sin_dlng * sin_dlng
    return 2.0 * a


def great_circle_distance_rads(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Central angle between two points, in radians."""
    a = great_circle_distance_squared(lat1, lng1, lat2, lng2) * 0.5
    return 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))


def great_circle_distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great circle distance in kilometers on the mean earth sphere."""
    return great_circle_distance_rads(lat1, lng1, lat2, lng2) * EARTH_RADIUS_KM


def pos_angle(rads: float) -> float:
    """Normalize an angle to [0, 2pi)."""
    tmp = rads + M_2PI if rads < 0.0 else rads
    if rads >= M_2PI:
        tmp -= M_2PI
    return tmp


def constrain_lng(lng: float) -> float:
    """Wrap a longitude into [-pi, pi]."""
    while lng > math.pi:
        lng -= M_2PI
    while lng < -math.pi:
        lng += M_2PI
    return lng


def azimuth(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Initial bearing from point 1 to point 2.

    Returns:
        Azimuth in radians, clockwise from north, normalized to [0, 2pi)
    """
    cos_lat2 = math.cos(lat2)
    return pos_angle(math.atan2(
        cos_lat2 * math.sin(lng2 - lng1),
        math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * cos_lat2 * math.cos(lng2 - lng1),
    ))


def _clamp_unit(value: float) -> float:
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


def destination(lat1: float, lng1: float, az: float, distance: float) -> Tuple[float, float]:
    """
    Point reached by travelling a great circle arc from a start point.

    Args:
        lat1: Start latitude in radians
        lng1: Start longitude in radians
        az: Azimuth in radians, clockwise from north
        distance: Arc length in radians

    Returns:
        (lat, lng) in radians. Landing on a pole yields longitude 0.
    """
    if distance < EPSILON:
        return lat1, lng1

    az = pos_angle(az)

    # Due north or due south
    if az < EPSILON or abs(az - math.pi) < EPSILON:
        if az < EPSILON:
            lat2 = lat1 + distance
        else:
            lat2 = lat1 - distance

        if abs(lat2 - math.pi / 2) < EPSILON:
            return math.pi / 2, 0.0
        if abs(lat2 + math.pi / 2) < EPSILON:
            return -math.pi / 2, 0.0
        return lat2, constrain_lng(lng1)

    sin_lat = _clamp_unit(
        math.sin(lat1) * math.cos(distance)
        + math.cos(lat1) * math.sin(distance) * math.cos(az)
    )
    lat2 = math.asin(sin_lat)

    if abs(lat2 - math.pi / 2) < EPSILON:
        return math.pi / 2, 0.0
    if abs(lat2 + math.pi / 2) < EPSILON:
        return -math.pi / 2, 0.0

    sin_lng = _clamp_unit(math.sin(az) * math.sin(distance) / math.cos(lat2))
    cos_lng = _clamp_unit(
        (math.cos(distance) - math.sin(lat1) * math.sin(lat2)) / math.cos(lat1) / math.cos(lat2)
    )
    return lat2, constrain_lng(lng1 + math.atan2(sin_lng, cos_lng))
