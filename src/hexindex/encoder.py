"""
Conversion between geographic points and packed cell indexes.

The functions here expect already validated input: latitude/longitude in
range, resolution 0-15 and a parsed CellIndex. Degrees are converted to
radians at this layer; everything below works in radians.
"""
import math
from typing import List, Tuple

from . import index
from .basecells import (
    FaceIJK,
    Overage,
    cross_face,
    home_face_ijk,
    is_cw_offset_face,
    is_pentagon,
    place_at_resolution_zero,
)
from .coords import (
    CoordIJK,
    Direction,
    Vec2d,
    down_aperture_ccw,
    down_aperture_cw,
    from_hex2d,
    is_class_iii,
    neighbor,
    normalize,
    sub,
    to_hex2d,
    unit_ijk_to_digit,
    up_aperture_ccw,
    up_aperture_cw,
)
from .faces import from_face_local, geo_to_hex2d
from .index import CellIndex

M_PI_180 = 0.0174532925199432957692369076848861271111
M_180_PI = 57.29577951308232087679815481410517033240547

# Distance from a cell center to its vertices in hex2d units
VERTEX_RADIUS = 1.0 / math.sqrt(3.0)


def geo_to_face_ijk(lat: float, lng: float, res: int) -> FaceIJK:
    """Face and IJK of the cell containing a point (radians)."""
    face, v = geo_to_hex2d(lat, lng, res)
    return FaceIJK(face, from_hex2d(v))


def face_ijk_to_cell(fijk: FaceIJK, res: int) -> CellIndex:
    """
    Build the index of a cell from its face coordinates.

    Walks from res up to resolution 0 recording the child digit at every
    level, then rotates the digits from the face frame into the base cell's
    frame.
    """
    if res == 0:
        base_cell, _ = place_at_resolution_zero(fijk)
        return CellIndex.pack(0, base_cell, ())

    ijk = fijk.coord
    digits = [Direction.CENTER] * res
    for r in range(res - 1, -1, -1):
        last_ijk = ijk
        if is_class_iii(r + 1):
            ijk = up_aperture_ccw(ijk)
            last_center = down_aperture_ccw(ijk)
        else:
            ijk = up_aperture_cw(ijk)
            last_center = down_aperture_cw(ijk)
        digits[r] = unit_ijk_to_digit(normalize(sub(last_ijk, last_center)))

    base_fijk = FaceIJK(fijk.face, ijk)
    base_cell, num_rots = place_at_resolution_zero(base_fijk)
    cell = CellIndex.pack(res, base_cell, digits)

    if is_pentagon(base_cell):
        # no K subsequence on pentagons; rotate off of it first
        if index.leading_non_zero_digit(cell) == Direction.K_AXES:
            if is_cw_offset_face(base_cell, base_fijk.face):
                cell = index.rotate60cw(cell)
            else:
                cell = index.rotate60ccw(cell)
        for _ in range(num_rots):
            cell = index.rotate_pent60ccw(cell)
    else:
        for _ in range(num_rots):
            cell = index.rotate60ccw(cell)

    return cell


def _walk_digits(cell: CellIndex, coord: CoordIJK) -> CoordIJK:
    for r in range(1, cell.resolution + 1):
        if is_class_iii(r):
            coord = down_aperture_ccw(coord)
        else:
            coord = down_aperture_cw(coord)
        coord = neighbor(coord, cell.digit(r))
    return coord


def cell_to_face_ijk(cell: CellIndex) -> FaceIJK:
    """
    Face coordinates of a cell center.

    Starts on the base cell's home face and moves onto a neighboring face
    when the center falls outside of it.
    """
    base_cell = cell.base_cell
    pentagon = is_pentagon(base_cell)
    if pentagon and index.leading_non_zero_digit(cell) == Direction.IK_AXES:
        cell = index.rotate60cw(cell)

    res = cell.resolution
    home = home_face_ijk(base_cell)
    fijk = FaceIJK(home.face, _walk_digits(cell, home.coord))

    if not pentagon and (res == 0 or home.coord == CoordIJK(0, 0, 0)):
        return fijk

    orig_ijk = fijk.coord
    adj_res = res
    if is_class_iii(res):
        # overage is checked on the Class II grid one level down
        fijk = FaceIJK(fijk.face, down_aperture_cw(fijk.coord))
        adj_res += 1

    pent_leading_4 = pentagon and index.leading_non_zero_digit(cell) == Direction.I_AXES
    fijk, overage = cross_face(fijk, adj_res, pent_leading_4)
    if overage != Overage.NO_OVERAGE:
        if pentagon:
            while overage != Overage.NO_OVERAGE:
                fijk, overage = cross_face(fijk, adj_res, False)
        if adj_res != res:
            fijk = FaceIJK(fijk.face, up_aperture_cw(fijk.coord))
    elif adj_res != res:
        fijk = FaceIJK(fijk.face, orig_ijk)

    return fijk


def encode(lat: float, lng: float, res: int) -> CellIndex:
    """Cell containing a point given in degrees."""
    fijk = geo_to_face_ijk(lat * M_PI_180, lng * M_PI_180, res)
    return face_ijk_to_cell(fijk, res)


def _to_degrees(lat: float, lng: float) -> Tuple[float, float]:
    return lat * M_180_PI, lng * M_180_PI


def decode(cell: CellIndex) -> Tuple[float, float]:
    """Center of a cell as (lat, lng) in degrees."""
    fijk = cell_to_face_ijk(cell)
    return _to_degrees(*from_face_local(fijk.face, to_hex2d(fijk.coord), cell.resolution))


def cell_vertices(cell: CellIndex) -> List[Tuple[float, float]]:
    """
    Approximate cell corners as (lat, lng) in degrees.

    Corners are placed around the center on the decoded face without moving
    them onto neighboring faces, so cells that straddle a face edge get
    slightly distorted corners. Every cell on a pentagon base cell gets
    five corners, all others six.
    """
    fijk = cell_to_face_ijk(cell)
    center = to_hex2d(fijk.coord)
    res = cell.resolution
    num_verts = 5 if is_pentagon(cell.base_cell) else 6

    vertices = []
    for v in range(num_verts):
        angle = math.pi / 6.0 + 2.0 * math.pi * v / num_verts
        corner = Vec2d(
            center.x + VERTEX_RADIUS * math.cos(angle),
            center.y + VERTEX_RADIUS * math.sin(angle),
        )
        vertices.append(_to_degrees(*from_face_local(fijk.face, corner, res)))
    return vertices


def decode_bounds(cell: CellIndex) -> Tuple[float, float, float, float]:
    """
    Bounding box of a cell's corners in degrees.

    Returns:
        (min_lat, max_lat, min_lng, max_lng). Cells crossing the antimeridian
        are not split, so their longitude span covers the long way around.
    """
    vertices = cell_vertices(cell)
    lats = [lat for lat, _ in vertices]
    lngs = [lng for _, lng in vertices]
    return min(lats), max(lats), min(lngs), max(lngs)
