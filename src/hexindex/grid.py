"""
Spatial indexing on a hierarchical hexagonal grid.
Resolution 9 = ~174m hexagon edge length (~0.10 km² area)
"""
import logging
import math
import time

from pydantic import ValidationError

from . import encoder, metrics
from .basecells import is_pentagon as _is_pentagon_base_cell
from .coords import Direction
from .errors import InputRangeError, IndexFormatError, NeighborsNotSupportedError
from .faces import RES0_U_GNOMONIC
from .geometry import EARTH_RADIUS_KM
from .index import CELL_MODE, MAX_RESOLUTION, CellIndex, leading_non_zero_digit
from .models import CellBounds, GeoPoint

logger = logging.getLogger(__name__)

# Grid resolution used when the caller does not pick one
# 5 = ~8.5km edge (~250km² area), city scale
# 9 = ~174m edge (~0.10km² area) ← DEFAULT, neighborhood scale
# 12 = ~9.4m edge (~300m² area), building scale
DEFAULT_RESOLUTION = 9

RESOLUTION_EXAMPLES = "5 (city ~8.5km edge), 9 (neighborhood ~174m edge), 12 (building ~9.4m edge)"

_FIELD_NAMES = {"lat": "latitude", "lon": "longitude"}
_FIELD_RANGES = {"lat": "-90 and 90", "lon": "-180 and 180"}


def _validate_resolution(resolution) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise InputRangeError(
            "resolution", resolution,
            f"Resolution must be an integer between 0 and {MAX_RESOLUTION}, got {resolution!r}. "
            f"Common choices: {RESOLUTION_EXAMPLES}"
        )
    if not 0 <= resolution <= MAX_RESOLUTION:
        raise InputRangeError(
            "resolution", resolution,
            f"Resolution must be between 0 and {MAX_RESOLUTION}, got {resolution}. "
            f"Common choices: {RESOLUTION_EXAMPLES}"
        )
    return resolution


def _validate_point(lat, lon) -> GeoPoint:
    try:
        return GeoPoint(lat=lat, lon=lon)
    except ValidationError as e:
        # pydantic reports fields in declaration order, latitude first
        field = e.errors()[0]["loc"][0]
        value = lat if field == "lat" else lon
        raise InputRangeError(
            _FIELD_NAMES[field], value,
            f"{_FIELD_NAMES[field].capitalize()} must be a number between "
            f"{_FIELD_RANGES[field]} degrees, got {value!r}"
        ) from e


def _parse(cell_id: str) -> CellIndex:
    try:
        return CellIndex.from_hex(cell_id)
    except IndexFormatError as e:
        logger.warning("Rejected cell id %r: %s", cell_id, e)
        raise


def latlon_to_cell(lat: float, lon: float, resolution: int = DEFAULT_RESOLUTION) -> str:
    """
    Convert lat/lon to a hexagon cell ID.

    Args:
        lat: Latitude in degrees, -90 to 90
        lon: Longitude in degrees, -180 to 180
        resolution: Grid resolution, 0 (coarsest) to 15 (finest)

    Returns:
        Cell ID as lowercase hex (e.g., "8928308280fffff")

    Raises:
        InputRangeError: If resolution, lat or lon is out of range (checked in that order)
    """
    start_time = time.time()
    try:
        resolution = _validate_resolution(resolution)
        point = _validate_point(lat, lon)
    except InputRangeError as e:
        metrics.encode_requests_total.labels(status="range_error").inc()
        logger.warning("Rejected %s=%r: %s", e.field, e.value, e)
        raise

    cell = encoder.encode(point.lat, point.lon, resolution)
    cell_id = cell.to_hex()

    if _is_pentagon_base_cell(cell.base_cell):
        metrics.pentagon_cells_total.labels(operation="encode").inc()
    metrics.encode_requests_total.labels(status="success").inc()
    metrics.operation_duration_seconds.labels(operation="encode").observe(time.time() - start_time)
    logger.debug("Encoded (%s, %s) at resolution %d to %s", point.lat, point.lon, resolution, cell_id)
    return cell_id


def cell_to_latlon(cell_id: str) -> tuple[float, float]:
    """
    Convert a cell ID back to lat/lon (center of hexagon).

    Args:
        cell_id: Cell ID as hex

    Returns:
        Tuple of (lat, lon) in degrees

    Raises:
        IndexFormatError: If cell_id is not a valid hex cell ID
    """
    start_time = time.time()
    try:
        cell = _parse(cell_id)
    except IndexFormatError:
        metrics.decode_requests_total.labels(operation="center", status="format_error").inc()
        raise

    lat, lon = encoder.decode(cell)

    if _is_pentagon_base_cell(cell.base_cell):
        metrics.pentagon_cells_total.labels(operation="center").inc()
    metrics.decode_requests_total.labels(operation="center", status="success").inc()
    metrics.operation_duration_seconds.labels(operation="center").observe(time.time() - start_time)
    logger.debug("Decoded %s to (%s, %s)", cell_id, lat, lon)
    return lat, lon


def cell_to_bounds(cell_id: str) -> CellBounds:
    """
    Approximate bounding box of a cell.

    Args:
        cell_id: Cell ID as hex

    Returns:
        CellBounds around the cell's corners (5 for pentagons, 6 otherwise)

    Raises:
        IndexFormatError: If cell_id is not a valid hex cell ID
    """
    start_time = time.time()
    try:
        cell = _parse(cell_id)
    except IndexFormatError:
        metrics.decode_requests_total.labels(operation="bounds", status="format_error").inc()
        raise

    min_lat, max_lat, min_lon, max_lon = encoder.decode_bounds(cell)
    bounds = CellBounds(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)

    if _is_pentagon_base_cell(cell.base_cell):
        metrics.pentagon_cells_total.labels(operation="bounds").inc()
    metrics.decode_requests_total.labels(operation="bounds", status="success").inc()
    metrics.operation_duration_seconds.labels(operation="bounds").observe(time.time() - start_time)
    logger.debug("Bounds of %s: %s", cell_id, bounds.as_tuple())
    return bounds


def get_neighbor_cells(cell_id: str, k: int = 1) -> list[str]:
    """
    Get all hexagons within k hops of the given cell.

    Neighbor traversal is not available on this grid; the cell ID is still
    validated so malformed input is reported as such.

    Raises:
        IndexFormatError: If cell_id is not a valid hex cell ID
        NeighborsNotSupportedError: Always, for a well formed cell ID
    """
    _parse(cell_id)
    raise NeighborsNotSupportedError(
        f"Neighbor enumeration (k={k}) is not supported; use cell_to_bounds for spatial queries"
    )


def get_resolution(cell_id: str) -> int:
    """Resolution encoded in a cell ID."""
    return _parse(cell_id).resolution


def get_base_cell_number(cell_id: str) -> int:
    """Resolution 0 ancestor (0-121) of a cell ID."""
    return _parse(cell_id).base_cell


def is_pentagon(cell_id: str) -> bool:
    """
    Whether a cell is one of the 12 pentagons at its resolution.

    Only the center child chain of a pentagon base cell is a pentagon.
    """
    cell = _parse(cell_id)
    return _is_pentagon_base_cell(cell.base_cell) and leading_non_zero_digit(cell) == Direction.CENTER


def is_valid_cell(cell_id) -> bool:
    """
    Check that a value is a well formed cell ID. Never raises.

    Mode must be 1, reserved bits 0, digits up to the resolution 0-6 and
    digits past it 7. Pentagon cells never have K_AXES as leading digit.
    """
    try:
        cell = CellIndex.from_hex(cell_id)
    except IndexFormatError:
        return False

    if cell.value >> 63 or cell.mode != CELL_MODE or cell.reserved != 0:
        return False

    res = cell.resolution
    for r in range(1, MAX_RESOLUTION + 1):
        digit = cell.digit(r)
        if r <= res and digit == Direction.INVALID:
            return False
        if r > res and digit != Direction.INVALID:
            return False

    if _is_pentagon_base_cell(cell.base_cell) and leading_non_zero_digit(cell) == Direction.K_AXES:
        return False
    return True


def max_cell_radius_km(resolution: int = DEFAULT_RESOLUTION) -> float:
    """
    Upper bound on the distance from any point to the center of its cell.

    Raises:
        InputRangeError: If resolution is out of range
    """
    resolution = _validate_resolution(resolution)
    return EARTH_RADIUS_KM * RES0_U_GNOMONIC / math.sqrt(3.0) / math.sqrt(7.0) ** resolution
