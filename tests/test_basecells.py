"""
Unit tests for base cell tables and face adjacency.
"""
import pytest

from hexindex.basecells import (
    BASE_CELLS,
    FACE_IJK_BASE_CELLS,
    FACE_NEIGHBORS,
    IJ,
    JK,
    KI,
    NUM_BASE_CELLS,
    FaceIJK,
    Overage,
    cross_face,
    home_face_ijk,
    is_cw_offset_face,
    is_pentagon,
    place_at_resolution_zero,
)
from hexindex.coords import CoordIJK
from hexindex.errors import InternalError

PENTAGONS = [4, 14, 24, 38, 49, 58, 63, 72, 83, 97, 107, 117]


@pytest.mark.unit
class TestBaseCellTable:
    """Test suite for the base cell table."""

    def test_count(self):
        """Test that there are 122 base cells."""
        assert len(BASE_CELLS) == NUM_BASE_CELLS == 122

    def test_pentagons(self):
        """Test that exactly the 12 vertex cells are pentagons."""
        assert [bc for bc in range(NUM_BASE_CELLS) if is_pentagon(bc)] == PENTAGONS

    def test_home_face_ijk(self):
        """Test home positions of a hexagon and a pentagon."""
        assert home_face_ijk(0) == FaceIJK(1, CoordIJK(1, 0, 0))
        assert home_face_ijk(4) == FaceIJK(0, CoordIJK(2, 0, 0))

    def test_home_position_maps_back_unrotated(self):
        """Test that every base cell's home position looks up itself with no rotation."""
        for bc in range(NUM_BASE_CELLS):
            assert place_at_resolution_zero(home_face_ijk(bc)) == (bc, 0)

    def test_every_cell_appears_in_face_table(self):
        """Test that the face lookup table reaches all base cells."""
        seen = {
            entry[0]
            for face in FACE_IJK_BASE_CELLS
            for plane in face
            for row in plane
            for entry in row
        }
        assert seen == set(range(NUM_BASE_CELLS))

    def test_cw_offset_faces(self):
        """Test clockwise offset faces of pentagons."""
        assert is_cw_offset_face(14, 2)
        assert is_cw_offset_face(14, 6)
        assert not is_cw_offset_face(14, 3)
        # polar pentagons have none
        assert not any(is_cw_offset_face(4, face) for face in range(20))
        assert not any(is_cw_offset_face(117, face) for face in range(20))

    def test_out_of_range_lookups(self):
        """Test that unknown faces and base cells are internal errors."""
        with pytest.raises(InternalError):
            place_at_resolution_zero(FaceIJK(20, CoordIJK(0, 0, 0)))
        with pytest.raises(InternalError):
            is_pentagon(122)

    def test_lookup_clamps_coordinates(self):
        """Test that coordinates beyond 2 are clamped into the table."""
        assert place_at_resolution_zero(FaceIJK(0, CoordIJK(5, 0, 0))) == \
            place_at_resolution_zero(FaceIJK(0, CoordIJK(2, 0, 0)))


@pytest.mark.unit
class TestFaceNeighbors:
    """Test suite for the face adjacency table."""

    def test_central_entry_is_face_itself(self):
        """Test the central quadrant of every face."""
        for face, neighbors in enumerate(FACE_NEIGHBORS):
            assert neighbors[0].face == face
            assert neighbors[0].ccw_rot60 == 0

    def test_adjacency_is_symmetric(self):
        """Test that if A neighbors B then B neighbors A."""
        for face, neighbors in enumerate(FACE_NEIGHBORS):
            for quadrant in (IJ, KI, JK):
                other = neighbors[quadrant].face
                assert face in {n.face for n in FACE_NEIGHBORS[other][1:]}


@pytest.mark.unit
class TestCrossFace:
    """Test suite for cross_face."""

    def test_inside_face_unchanged(self):
        """Test coordinates within the face."""
        fijk = FaceIJK(0, CoordIJK(1, 0, 0))
        assert cross_face(fijk, 0, False) == (fijk, Overage.NO_OVERAGE)

    def test_overflow_into_ij_quadrant(self):
        """Test moving across the IJ edge of face 0 onto face 4."""
        moved, overage = cross_face(FaceIJK(0, CoordIJK(3, 0, 0)), 0, False)
        assert overage == Overage.NEW_FACE
        assert moved == FaceIJK(4, CoordIJK(3, 1, 0))

    def test_overflow_into_jk_quadrant(self):
        """Test moving across the JK edge of face 0 onto face 5."""
        moved, overage = cross_face(FaceIJK(0, CoordIJK(0, 2, 1)), 0, False)
        assert overage == Overage.NEW_FACE
        assert moved.face == 5

    def test_substrate_edge(self):
        """Test that substrate coordinates on the edge report FACE_EDGE."""
        fijk = FaceIJK(0, CoordIJK(4, 2, 0))
        assert cross_face(fijk, 0, False, substrate=True) == (fijk, Overage.FACE_EDGE)

    def test_class_iii_resolution_rejected(self):
        """Test that overage is only defined on Class II resolutions."""
        with pytest.raises(InternalError):
            cross_face(FaceIJK(0, CoordIJK(1, 0, 0)), 1, False)
