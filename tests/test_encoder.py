"""
Unit tests for encoder orchestration (validated input, no public API layer).
"""
import math

import pytest

from hexindex.basecells import NUM_BASE_CELLS, home_face_ijk, is_pentagon
from hexindex.encoder import (
    cell_to_face_ijk,
    cell_vertices,
    decode,
    decode_bounds,
    encode,
    face_ijk_to_cell,
    geo_to_face_ijk,
)
from hexindex.geometry import great_circle_distance_rads
from hexindex.index import CellIndex, leading_non_zero_digit

CITIES = [
    (37.7749, -122.4194),  # San Francisco
    (40.7128, -74.0060),   # New York
    (51.5074, -0.1278),    # London
    (35.6762, 139.6503),   # Tokyo
    (-33.8688, 151.2093),  # Sydney
    (-22.9068, -43.1729),  # Rio de Janeiro
]


def _angle_between(p1, p2) -> float:
    return great_circle_distance_rads(
        math.radians(p1[0]), math.radians(p1[1]), math.radians(p2[0]), math.radians(p2[1])
    )


@pytest.mark.unit
class TestEncode:
    """Test suite for encode."""

    def test_resolution_recorded(self):
        """Test that the index carries the requested resolution."""
        for res in range(16):
            assert encode(37.7749, -122.4194, res).resolution == res

    def test_known_pentagon_neighborhood(self):
        """Test a point encoded next to the base cell 4 pentagon."""
        cell = encode(58.673873878380526, 2.389386851097959, 1)
        assert cell.to_hex() == "8109bffffffffff"

    def test_pentagon_cells_never_lead_with_k(self):
        """Test points around every pentagon avoid the deleted K subsequence."""
        for bc in range(NUM_BASE_CELLS):
            if not is_pentagon(bc):
                continue
            lat, lon = decode(CellIndex.pack(0, bc, ()))
            for dlat, dlon in [(0.3, 0.0), (-0.3, 0.0), (0.0, 0.4), (0.0, -0.4), (0.2, 0.2)]:
                cell = encode(max(-90.0, min(90.0, lat + dlat)), lon + dlon, 3)
                if cell.base_cell == bc:
                    assert leading_non_zero_digit(cell) != 1


@pytest.mark.unit
class TestDecode:
    """Test suite for decode and face coordinate recovery."""

    @pytest.mark.parametrize("cell_id,lat,lon", [
        ("8403949ffffffff", 78.2041270329, -163.0317541712),
        ("840392bffffffff", 76.4716888372, -157.2674548147),
        ("8403935ffffffff", 76.1370791738, -154.5358942155),
    ])
    def test_reference_centers(self, cell_id, lat, lon):
        """Test decoded centers of known high latitude cells."""
        got_lat, got_lon = decode(CellIndex.from_hex(cell_id))
        assert got_lat == pytest.approx(lat, abs=1e-4)
        assert got_lon == pytest.approx(lon, abs=1e-4)

    def test_base_cell_center_is_home(self):
        """Test that a base cell decodes at its home position."""
        for bc in range(NUM_BASE_CELLS):
            fijk = cell_to_face_ijk(CellIndex.pack(0, bc, ()))
            assert fijk == home_face_ijk(bc)

    @pytest.mark.parametrize("res", [0, 1, 4, 9])
    def test_base_cell_centers_reencode(self, res):
        """Test that every base cell center encodes into that base cell."""
        for bc in range(NUM_BASE_CELLS):
            lat, lon = decode(CellIndex.pack(0, bc, ()))
            assert encode(lat, lon, res).base_cell == bc

    @pytest.mark.parametrize("lat,lon", CITIES)
    def test_face_ijk_roundtrip(self, lat, lon):
        """Test that a cell's face coordinates encode back to the cell."""
        for res in (3, 8, 11):
            cell = encode(lat, lon, res)
            assert face_ijk_to_cell(cell_to_face_ijk(cell), res) == cell

    @pytest.mark.parametrize("lat,lon", CITIES)
    def test_point_near_center(self, lat, lon):
        """Test that a point is close to the center of its cell."""
        res = 9
        center = decode(encode(lat, lon, res))
        # one cell circumradius at res 9 is ~0.22 km, i.e. ~3.5e-5 radians
        assert _angle_between((lat, lon), center) < 3.5e-5

    def test_encode_matches_face_lookup(self):
        """Test that encode is geo_to_face_ijk followed by face_ijk_to_cell."""
        lat, lon = 35.6762, 139.6503
        fijk = geo_to_face_ijk(math.radians(lat), math.radians(lon), 7)
        assert face_ijk_to_cell(fijk, 7) == encode(lat, lon, 7)


@pytest.mark.unit
class TestBounds:
    """Test suite for cell corners and bounds."""

    def test_hexagon_has_six_corners(self):
        """Test corner count of a hexagon."""
        assert len(cell_vertices(encode(37.7749, -122.4194, 9))) == 6

    def test_pentagon_has_five_corners(self):
        """Test corner count of a pentagon."""
        assert len(cell_vertices(CellIndex.pack(0, 4, ()))) == 5
        assert len(cell_vertices(CellIndex.from_hex("821c07fffffffff"))) == 5

    def test_bounds_contain_center(self):
        """Test that the bounding box surrounds the cell center."""
        for lat, lon in CITIES:
            cell = encode(lat, lon, 7)
            min_lat, max_lat, min_lon, max_lon = decode_bounds(cell)
            center_lat, center_lon = decode(cell)
            assert min_lat < center_lat < max_lat
            assert min_lon < center_lon < max_lon

    def test_bounds_shrink_with_resolution(self):
        """Test that finer cells have smaller boxes."""
        coarse = decode_bounds(encode(40.7128, -74.0060, 5))
        fine = decode_bounds(encode(40.7128, -74.0060, 9))
        assert (fine[1] - fine[0]) < (coarse[1] - coarse[0])
        assert (fine[3] - fine[2]) < (coarse[3] - coarse[2])
