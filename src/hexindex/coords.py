"""
Hexagonal lattice coordinates.

CoordIJK addresses a cell on one face with three axes 120 degrees apart;
i, j and k are never all positive in normalized form. Vec2d is the planar
hex2d frame of the same face where neighboring cell centers are 1 apart.

Aperture 7 steps alternate between two orientations: the counter-clockwise
variant lands on Class III (odd) resolutions and the clockwise one on
Class II (even) resolutions.
"""
import math
from enum import IntEnum
from typing import NamedTuple, Tuple

from .errors import InternalError

M_SQRT3_2 = 0.8660254037844386467637231707529361834714
M_RSIN60 = 1.1547005383792515290182975610039149112953
M_ONESEVENTH = 1.0 / 7.0


class CoordIJK(NamedTuple):
    i: int
    j: int
    k: int


class Vec2d(NamedTuple):
    x: float
    y: float


class Direction(IntEnum):
    """Child digit / unit direction on the lattice."""
    CENTER = 0
    K_AXES = 1
    J_AXES = 2
    JK_AXES = 3
    I_AXES = 4
    IK_AXES = 5
    IJ_AXES = 6
    # Unused resolution level
    INVALID = 7


NUM_DIGITS = 7

UNIT_VECS: Tuple[CoordIJK, ...] = (
    CoordIJK(0, 0, 0),  # CENTER
    CoordIJK(0, 0, 1),  # K
    CoordIJK(0, 1, 0),  # J
    CoordIJK(0, 1, 1),  # JK
    CoordIJK(1, 0, 0),  # I
    CoordIJK(1, 0, 1),  # IK
    CoordIJK(1, 1, 0),  # IJ
)


def is_class_iii(res: int) -> bool:
    """Odd resolutions use the Class III (rotated) axes."""
    return res % 2 == 1


def _lround(x: float) -> int:
    """Round half away from zero."""
    if x < 0.0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


def add(a: CoordIJK, b: CoordIJK) -> CoordIJK:
    return CoordIJK(a.i + b.i, a.j + b.j, a.k + b.k)


def sub(a: CoordIJK, b: CoordIJK) -> CoordIJK:
    return CoordIJK(a.i - b.i, a.j - b.j, a.k - b.k)


def scale(c: CoordIJK, factor: int) -> CoordIJK:
    return CoordIJK(c.i * factor, c.j * factor, c.k * factor)


def normalize(c: CoordIJK) -> CoordIJK:
    """
    Bring coordinates to the canonical form: no negative component and at
    least one component equal to zero.
    """
    i, j, k = c
    if i < 0:
        j -= i
        k -= i
        i = 0
    if j < 0:
        i -= j
        k -= j
        j = 0
    if k < 0:
        i -= k
        j -= k
        k = 0

    smallest = min(i, j, k)
    if smallest > 0:
        i -= smallest
        j -= smallest
        k -= smallest
    return CoordIJK(i, j, k)


def to_hex2d(c: CoordIJK) -> Vec2d:
    """Center of an IJK cell in the hex2d frame."""
    i = c.i - c.k
    j = c.j - c.k
    return Vec2d(i - 0.5 * j, j * M_SQRT3_2)


def from_hex2d(v: Vec2d) -> CoordIJK:
    """
    Cell containing a hex2d point.

    Works in the first quadrant on (|x|, |y|) in i/j axes, splits the
    fractional parts into bands of 1/3 to pick the nearest center, then folds
    the result back across the y axis and the x axis.
    """
    a1 = abs(v.x)
    a2 = abs(v.y)

    x2 = a2 * M_RSIN60
    x1 = a1 + x2 / 2.0

    m1 = int(x1)
    m2 = int(x2)

    r1 = x1 - m1
    r2 = x2 - m2

    if r1 < 0.5:
        if r1 < 1.0 / 3.0:
            i = m1
            j = m2 if r2 < (1.0 + r1) / 2.0 else m2 + 1
        else:
            j = m2 if r2 < (1.0 - r1) else m2 + 1
            i = m1 + 1 if (1.0 - r1) <= r2 < (2.0 * r1) else m1
    else:
        if r1 < 2.0 / 3.0:
            j = m2 if r2 < (1.0 - r1) else m2 + 1
            i = m1 if (2.0 * r1 - 1.0) < r2 < (1.0 - r1) else m1 + 1
        else:
            i = m1 + 1
            j = m2 if r2 < (r1 / 2.0) else m2 + 1

    # fold across the axes if necessary; j >= 0 here
    if v.x < 0.0:
        if j % 2 == 0:
            axis_i = j // 2
            i = i - 2 * (i - axis_i)
        else:
            axis_i = (j + 1) // 2
            i = i - (2 * (i - axis_i) + 1)

    if v.y < 0.0:
        i = i - (2 * j + 1) // 2
        j = -j

    return normalize(CoordIJK(i, j, 0))


def _combine(c: CoordIJK, i_vec: CoordIJK, j_vec: CoordIJK, k_vec: CoordIJK) -> CoordIJK:
    return normalize(add(add(scale(i_vec, c.i), scale(j_vec, c.j)), scale(k_vec, c.k)))


def down_aperture_ccw(c: CoordIJK) -> CoordIJK:
    """Center child of c one resolution finer, counter-clockwise aperture 7."""
    return _combine(c, CoordIJK(3, 0, 1), CoordIJK(1, 3, 0), CoordIJK(0, 1, 3))


def down_aperture_cw(c: CoordIJK) -> CoordIJK:
    """Center child of c one resolution finer, clockwise aperture 7."""
    return _combine(c, CoordIJK(3, 1, 0), CoordIJK(0, 3, 1), CoordIJK(1, 0, 3))


def up_aperture_ccw(c: CoordIJK) -> CoordIJK:
    """Parent of c one resolution coarser, counter-clockwise aperture 7."""
    i = c.i - c.k
    j = c.j - c.k
    return normalize(CoordIJK(
        _lround((3 * i - j) * M_ONESEVENTH),
        _lround((i + 2 * j) * M_ONESEVENTH),
        0,
    ))


def up_aperture_cw(c: CoordIJK) -> CoordIJK:
    """Parent of c one resolution coarser, clockwise aperture 7."""
    i = c.i - c.k
    j = c.j - c.k
    return normalize(CoordIJK(
        _lround((2 * i + j) * M_ONESEVENTH),
        _lround((3 * j - i) * M_ONESEVENTH),
        0,
    ))


def rotate60ccw(c: CoordIJK) -> CoordIJK:
    return _combine(c, CoordIJK(1, 1, 0), CoordIJK(0, 1, 1), CoordIJK(1, 0, 1))


def rotate60cw(c: CoordIJK) -> CoordIJK:
    return _combine(c, CoordIJK(1, 0, 1), CoordIJK(1, 1, 0), CoordIJK(0, 1, 1))


def neighbor(c: CoordIJK, digit: int) -> CoordIJK:
    """Step one cell in the given direction. CENTER and INVALID leave c as is."""
    if Direction.CENTER < digit < NUM_DIGITS:
        return normalize(add(c, UNIT_VECS[digit]))
    return c


def unit_ijk_to_digit(c: CoordIJK) -> Direction:
    """
    Direction of a unit (or zero) IJK vector.

    Raises:
        InternalError: If c is not one of the seven unit vectors
    """
    c = normalize(c)
    for digit, unit in enumerate(UNIT_VECS):
        if c == unit:
            return Direction(digit)
    raise InternalError(f"{tuple(c)} is not a unit IJK vector")


# Digit permutations induced by rotating the digit's unit vector
_DIGIT_CCW = tuple(unit_ijk_to_digit(rotate60ccw(u)) for u in UNIT_VECS) + (Direction.INVALID,)
_DIGIT_CW = tuple(unit_ijk_to_digit(rotate60cw(u)) for u in UNIT_VECS) + (Direction.INVALID,)


def rotate_digit_ccw(digit: int) -> Direction:
    """Rotate a digit 60 degrees counter-clockwise: 1->5->4->6->2->3->1."""
    return _DIGIT_CCW[digit]


def rotate_digit_cw(digit: int) -> Direction:
    """Rotate a digit 60 degrees clockwise: 1->3->2->6->4->5->1."""
    return _DIGIT_CW[digit]
