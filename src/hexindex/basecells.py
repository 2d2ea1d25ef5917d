"""
The 122 resolution 0 base cells and the icosahedron face adjacency.

Every base cell has a home face and a home IJK position on it. Twelve of the
base cells are pentagons centered on icosahedron vertices. A pentagon has up
to two "clockwise offset" faces on which its digits are rotated the other way.
"""
from enum import IntEnum
from typing import NamedTuple, Tuple

from .coords import CoordIJK, add, normalize, rotate60ccw, rotate60cw, scale, sub
from .errors import InternalError
from .faces import NUM_ICOSA_FACES

NUM_BASE_CELLS = 122


class FaceIJK(NamedTuple):
    """IJK coordinates on a specific face."""
    face: int
    coord: CoordIJK


class BaseCell(NamedTuple):
    face: int
    home: CoordIJK
    is_pentagon: bool
    cw_offset_faces: Tuple[int, ...]


class FaceOrientIJK(NamedTuple):
    """Where a face's quadrant lands on the adjacent face."""
    face: int
    translate: CoordIJK
    ccw_rot60: int


class Overage(IntEnum):
    NO_OVERAGE = 0
    # On an edge, substrate grids only
    FACE_EDGE = 1
    NEW_FACE = 2


# Quadrants of a face used to index FACE_NEIGHBORS
CENTRAL = 0
IJ = 1
KI = 2
JK = 3

# Maximum i + j + k on a face, by Class II resolution
MAX_DIM_BY_CII_RES = (
    2, -1, 14, -1, 98, -1, 686, -1, 4802, -1, 33614, -1, 235298, -1, 1647086, -1, 11529602,
)

# Length of a resolution 0 unit vector, by Class II resolution
UNIT_SCALE_BY_CII_RES = (
    1, -1, 7, -1, 49, -1, 343, -1, 2401, -1, 16807, -1, 117649, -1, 823543, -1, 5764801,
)

BASE_CELLS: Tuple[BaseCell, ...] = (
    BaseCell(1, CoordIJK(1, 0, 0), False, ()),  # 0
    BaseCell(2, CoordIJK(1, 1, 0), False, ()),  # 1
    BaseCell(1, CoordIJK(0, 0, 0), False, ()),  # 2
    BaseCell(2, CoordIJK(1, 0, 0), False, ()),  # 3
    BaseCell(0, CoordIJK(2, 0, 0), True, ()),  # 4
    BaseCell(1, CoordIJK(1, 1, 0), False, ()),  # 5
    BaseCell(1, CoordIJK(0, 0, 1), False, ()),  # 6
    BaseCell(2, CoordIJK(0, 0, 0), False, ()),  # 7
    BaseCell(0, CoordIJK(1, 0, 0), False, ()),  # 8
    BaseCell(2, CoordIJK(0, 1, 0), False, ()),  # 9
    BaseCell(1, CoordIJK(0, 1, 0), False, ()),  # 10
    BaseCell(1, CoordIJK(0, 1, 1), False, ()),  # 11
    BaseCell(3, CoordIJK(1, 0, 0), False, ()),  # 12
    BaseCell(3, CoordIJK(1, 1, 0), False, ()),  # 13
    BaseCell(11, CoordIJK(2, 0, 0), True, (2, 6)),  # 14
    BaseCell(4, CoordIJK(1, 0, 0), False, ()),  # 15
    BaseCell(0, CoordIJK(0, 0, 0), False, ()),  # 16
    BaseCell(6, CoordIJK(0, 1, 0), False, ()),  # 17
    BaseCell(0, CoordIJK(0, 0, 1), False, ()),  # 18
    BaseCell(2, CoordIJK(0, 1, 1), False, ()),  # 19
    BaseCell(7, CoordIJK(0, 0, 1), False, ()),  # 20
    BaseCell(2, CoordIJK(0, 0, 1), False, ()),  # 21
    BaseCell(0, CoordIJK(1, 1, 0), False, ()),  # 22
    BaseCell(6, CoordIJK(0, 0, 1), False, ()),  # 23
    BaseCell(10, CoordIJK(2, 0, 0), True, (1, 5)),  # 24
    BaseCell(6, CoordIJK(0, 0, 0), False, ()),  # 25
    BaseCell(3, CoordIJK(0, 0, 0), False, ()),  # 26
    BaseCell(11, CoordIJK(1, 0, 0), False, ()),  # 27
    BaseCell(4, CoordIJK(1, 1, 0), False, ()),  # 28
    BaseCell(3, CoordIJK(0, 1, 0), False, ()),  # 29
    BaseCell(0, CoordIJK(0, 1, 1), False, ()),  # 30
    BaseCell(4, CoordIJK(0, 0, 0), False, ()),  # 31
    BaseCell(5, CoordIJK(0, 1, 0), False, ()),  # 32
    BaseCell(0, CoordIJK(0, 1, 0), False, ()),  # 33
    BaseCell(7, CoordIJK(0, 1, 0), False, ()),  # 34
    BaseCell(11, CoordIJK(1, 1, 0), False, ()),  # 35
    BaseCell(7, CoordIJK(0, 0, 0), False, ()),  # 36
    BaseCell(10, CoordIJK(1, 0, 0), False, ()),  # 37
    BaseCell(12, CoordIJK(2, 0, 0), True, (3, 7)),  # 38
    BaseCell(6, CoordIJK(1, 0, 1), False, ()),  # 39
    BaseCell(7, CoordIJK(1, 0, 1), False, ()),  # 40
    BaseCell(4, CoordIJK(0, 0, 1), False, ()),  # 41
    BaseCell(3, CoordIJK(0, 0, 1), False, ()),  # 42
    BaseCell(3, CoordIJK(0, 1, 1), False, ()),  # 43
    BaseCell(4, CoordIJK(0, 1, 0), False, ()),  # 44
    BaseCell(6, CoordIJK(1, 0, 0), False, ()),  # 45
    BaseCell(11, CoordIJK(0, 0, 0), False, ()),  # 46
    BaseCell(8, CoordIJK(0, 0, 1), False, ()),  # 47
    BaseCell(5, CoordIJK(0, 0, 1), False, ()),  # 48
    BaseCell(14, CoordIJK(2, 0, 0), True, (0, 9)),  # 49
    BaseCell(5, CoordIJK(0, 0, 0), False, ()),  # 50
    BaseCell(12, CoordIJK(1, 0, 0), False, ()),  # 51
    BaseCell(10, CoordIJK(1, 1, 0), False, ()),  # 52
    BaseCell(4, CoordIJK(0, 1, 1), False, ()),  # 53
    BaseCell(12, CoordIJK(1, 1, 0), False, ()),  # 54
    BaseCell(7, CoordIJK(1, 0, 0), False, ()),  # 55
    BaseCell(11, CoordIJK(0, 1, 0), False, ()),  # 56
    BaseCell(10, CoordIJK(0, 0, 0), False, ()),  # 57
    BaseCell(13, CoordIJK(2, 0, 0), True, (4, 8)),  # 58
    BaseCell(10, CoordIJK(0, 0, 1), False, ()),  # 59
    BaseCell(11, CoordIJK(0, 0, 1), False, ()),  # 60
    BaseCell(9, CoordIJK(0, 1, 0), False, ()),  # 61
    BaseCell(8, CoordIJK(0, 1, 0), False, ()),  # 62
    BaseCell(6, CoordIJK(2, 0, 0), True, (11, 15)),  # 63
    BaseCell(8, CoordIJK(0, 0, 0), False, ()),  # 64
    BaseCell(9, CoordIJK(0, 0, 1), False, ()),  # 65
    BaseCell(14, CoordIJK(1, 0, 0), False, ()),  # 66
    BaseCell(5, CoordIJK(1, 0, 1), False, ()),  # 67
    BaseCell(16, CoordIJK(0, 1, 1), False, ()),  # 68
    BaseCell(8, CoordIJK(1, 0, 1), False, ()),  # 69
    BaseCell(5, CoordIJK(1, 0, 0), False, ()),  # 70
    BaseCell(12, CoordIJK(0, 0, 0), False, ()),  # 71
    BaseCell(7, CoordIJK(2, 0, 0), True, (12, 16)),  # 72
    BaseCell(12, CoordIJK(0, 1, 0), False, ()),  # 73
    BaseCell(10, CoordIJK(0, 1, 0), False, ()),  # 74
    BaseCell(9, CoordIJK(0, 0, 0), False, ()),  # 75
    BaseCell(13, CoordIJK(1, 0, 0), False, ()),  # 76
    BaseCell(16, CoordIJK(0, 0, 1), False, ()),  # 77
    BaseCell(15, CoordIJK(0, 1, 1), False, ()),  # 78
    BaseCell(15, CoordIJK(0, 1, 0), False, ()),  # 79
    BaseCell(16, CoordIJK(0, 1, 0), False, ()),  # 80
    BaseCell(14, CoordIJK(1, 1, 0), False, ()),  # 81
    BaseCell(13, CoordIJK(1, 1, 0), False, ()),  # 82
    BaseCell(5, CoordIJK(2, 0, 0), True, (10, 19)),  # 83
    BaseCell(8, CoordIJK(1, 0, 0), False, ()),  # 84
    BaseCell(14, CoordIJK(0, 0, 0), False, ()),  # 85
    BaseCell(9, CoordIJK(1, 0, 1), False, ()),  # 86
    BaseCell(14, CoordIJK(0, 0, 1), False, ()),  # 87
    BaseCell(17, CoordIJK(0, 0, 1), False, ()),  # 88
    BaseCell(12, CoordIJK(0, 0, 1), False, ()),  # 89
    BaseCell(16, CoordIJK(0, 0, 0), False, ()),  # 90
    BaseCell(17, CoordIJK(0, 1, 1), False, ()),  # 91
    BaseCell(15, CoordIJK(0, 0, 1), False, ()),  # 92
    BaseCell(16, CoordIJK(1, 0, 1), False, ()),  # 93
    BaseCell(9, CoordIJK(1, 0, 0), False, ()),  # 94
    BaseCell(15, CoordIJK(0, 0, 0), False, ()),  # 95
    BaseCell(13, CoordIJK(0, 0, 0), False, ()),  # 96
    BaseCell(8, CoordIJK(2, 0, 0), True, (13, 17)),  # 97
    BaseCell(13, CoordIJK(0, 1, 0), False, ()),  # 98
    BaseCell(17, CoordIJK(1, 0, 1), False, ()),  # 99
    BaseCell(19, CoordIJK(0, 1, 0), False, ()),  # 100
    BaseCell(14, CoordIJK(0, 1, 0), False, ()),  # 101
    BaseCell(19, CoordIJK(0, 1, 1), False, ()),  # 102
    BaseCell(17, CoordIJK(0, 1, 0), False, ()),  # 103
    BaseCell(13, CoordIJK(0, 0, 1), False, ()),  # 104
    BaseCell(17, CoordIJK(0, 0, 0), False, ()),  # 105
    BaseCell(16, CoordIJK(1, 0, 0), False, ()),  # 106
    BaseCell(9, CoordIJK(2, 0, 0), True, (14, 18)),  # 107
    BaseCell(15, CoordIJK(1, 0, 1), False, ()),  # 108
    BaseCell(15, CoordIJK(1, 0, 0), False, ()),  # 109
    BaseCell(18, CoordIJK(0, 1, 1), False, ()),  # 110
    BaseCell(18, CoordIJK(0, 0, 1), False, ()),  # 111
    BaseCell(19, CoordIJK(0, 0, 1), False, ()),  # 112
    BaseCell(17, CoordIJK(1, 0, 0), False, ()),  # 113
    BaseCell(19, CoordIJK(0, 0, 0), False, ()),  # 114
    BaseCell(18, CoordIJK(0, 1, 0), False, ()),  # 115
    BaseCell(18, CoordIJK(1, 0, 1), False, ()),  # 116
    BaseCell(19, CoordIJK(2, 0, 0), True, ()),  # 117
    BaseCell(19, CoordIJK(1, 0, 0), False, ()),  # 118
    BaseCell(18, CoordIJK(0, 0, 0), False, ()),  # 119
    BaseCell(19, CoordIJK(1, 0, 1), False, ()),  # 120
    BaseCell(18, CoordIJK(1, 0, 0), False, ()),  # 121
)

# Resolution 0 cell at each (face, i, j, k) with i, j, k in [0, 2]:
# (base cell, number of 60 degree ccw rotations from face to base cell frame)
FACE_IJK_BASE_CELLS: Tuple = (
    (  # face 0
        (((16, 0), (18, 0), (24, 0)),
         ((33, 0), (30, 0), (32, 3)),
         ((49, 1), (48, 3), (50, 3))),
        (((8, 0), (5, 5), (10, 5)),
         ((22, 0), (16, 0), (18, 0)),
         ((41, 1), (33, 0), (30, 0))),
        (((4, 0), (0, 5), (2, 5)),
         ((15, 1), (8, 0), (5, 5)),
         ((31, 1), (22, 0), (16, 0))),
    ),
    (  # face 1
        (((2, 0), (6, 0), (14, 0)),
         ((10, 0), (11, 0), (17, 3)),
         ((24, 1), (23, 3), (25, 3))),
        (((0, 0), (1, 5), (9, 5)),
         ((5, 0), (2, 0), (6, 0)),
         ((18, 1), (10, 0), (11, 0))),
        (((4, 1), (3, 5), (7, 5)),
         ((8, 1), (0, 0), (1, 5)),
         ((16, 1), (5, 0), (2, 0))),
    ),
    (  # face 2
        (((7, 0), (21, 0), (38, 0)),
         ((9, 0), (19, 0), (34, 3)),
         ((14, 1), (20, 3), (36, 3))),
        (((3, 0), (13, 5), (29, 5)),
         ((1, 0), (7, 0), (21, 0)),
         ((6, 1), (9, 0), (19, 0))),
        (((4, 2), (12, 5), (26, 5)),
         ((0, 1), (3, 0), (13, 5)),
         ((2, 1), (1, 0), (7, 0))),
    ),
    (  # face 3
        (((26, 0), (42, 0), (58, 0)),
         ((29, 0), (43, 0), (62, 3)),
         ((38, 1), (47, 3), (64, 3))),
        (((12, 0), (28, 5), (44, 5)),
         ((13, 0), (26, 0), (42, 0)),
         ((21, 1), (29, 0), (43, 0))),
        (((4, 3), (15, 5), (31, 5)),
         ((3, 1), (12, 0), (28, 5)),
         ((7, 1), (13, 0), (26, 0))),
    ),
    (  # face 4
        (((31, 0), (41, 0), (49, 0)),
         ((44, 0), (53, 0), (61, 3)),
         ((58, 1), (65, 3), (75, 3))),
        (((15, 0), (22, 5), (33, 5)),
         ((28, 0), (31, 0), (41, 0)),
         ((42, 1), (44, 0), (53, 0))),
        (((4, 4), (8, 5), (16, 5)),
         ((12, 1), (15, 0), (22, 5)),
         ((26, 1), (28, 0), (31, 0))),
    ),
    (  # face 5
        (((50, 0), (48, 0), (49, 3)),
         ((32, 0), (30, 3), (33, 3)),
         ((24, 3), (18, 3), (16, 3))),
        (((70, 0), (67, 0), (66, 3)),
         ((52, 3), (50, 0), (48, 0)),
         ((37, 3), (32, 0), (30, 3))),
        (((83, 0), (87, 3), (85, 3)),
         ((74, 3), (70, 0), (67, 0)),
         ((57, 1), (52, 3), (50, 0))),
    ),
    (  # face 6
        (((25, 0), (23, 0), (24, 3)),
         ((17, 0), (11, 3), (10, 3)),
         ((14, 3), (6, 3), (2, 3))),
        (((45, 0), (39, 0), (37, 3)),
         ((35, 3), (25, 0), (23, 0)),
         ((27, 3), (17, 0), (11, 3))),
        (((63, 0), (59, 3), (57, 3)),
         ((56, 3), (45, 0), (39, 0)),
         ((46, 3), (35, 3), (25, 0))),
    ),
    (  # face 7
        (((36, 0), (20, 0), (14, 3)),
         ((34, 0), (19, 3), (9, 3)),
         ((38, 3), (21, 3), (7, 3))),
        (((55, 0), (40, 0), (27, 3)),
         ((54, 3), (36, 0), (20, 0)),
         ((51, 3), (34, 0), (19, 3))),
        (((72, 0), (60, 3), (46, 3)),
         ((73, 3), (55, 0), (40, 0)),
         ((71, 3), (54, 3), (36, 0))),
    ),
    (  # face 8
        (((64, 0), (47, 0), (38, 3)),
         ((62, 0), (43, 3), (29, 3)),
         ((58, 3), (42, 3), (26, 3))),
        (((84, 0), (69, 0), (51, 3)),
         ((82, 3), (64, 0), (47, 0)),
         ((76, 3), (62, 0), (43, 3))),
        (((97, 0), (89, 3), (71, 3)),
         ((98, 3), (84, 0), (69, 0)),
         ((96, 3), (82, 3), (64, 0))),
    ),
    (  # face 9
        (((75, 0), (65, 0), (58, 3)),
         ((61, 0), (53, 3), (44, 3)),
         ((49, 3), (41, 3), (31, 3))),
        (((94, 0), (86, 0), (76, 3)),
         ((81, 3), (75, 0), (65, 0)),
         ((66, 3), (61, 0), (53, 3))),
        (((107, 0), (104, 3), (96, 3)),
         ((101, 3), (94, 0), (86, 0)),
         ((85, 3), (81, 3), (75, 0))),
    ),
    (  # face 10
        (((57, 0), (59, 0), (63, 3)),
         ((74, 0), (78, 3), (79, 3)),
         ((83, 3), (92, 3), (95, 3))),
        (((37, 0), (39, 3), (45, 3)),
         ((52, 0), (57, 0), (59, 0)),
         ((70, 3), (74, 0), (78, 3))),
        (((24, 0), (23, 3), (25, 3)),
         ((32, 3), (37, 0), (39, 3)),
         ((50, 3), (52, 0), (57, 0))),
    ),
    (  # face 11
        (((46, 0), (60, 0), (72, 3)),
         ((56, 0), (68, 3), (80, 3)),
         ((63, 3), (77, 3), (90, 3))),
        (((27, 0), (40, 3), (55, 3)),
         ((35, 0), (46, 0), (60, 0)),
         ((45, 3), (56, 0), (68, 3))),
        (((14, 0), (20, 3), (36, 3)),
         ((17, 3), (27, 0), (40, 3)),
         ((25, 3), (35, 0), (46, 0))),
    ),
    (  # face 12
        (((71, 0), (89, 0), (97, 3)),
         ((73, 0), (91, 3), (103, 3)),
         ((72, 3), (88, 3), (105, 3))),
        (((51, 0), (69, 3), (84, 3)),
         ((54, 0), (71, 0), (89, 0)),
         ((55, 3), (73, 0), (91, 3))),
        (((38, 0), (47, 3), (64, 3)),
         ((34, 3), (51, 0), (69, 3)),
         ((36, 3), (54, 0), (71, 0))),
    ),
    (  # face 13
        (((96, 0), (104, 0), (107, 3)),
         ((98, 0), (110, 3), (115, 3)),
         ((97, 3), (111, 3), (119, 3))),
        (((76, 0), (86, 3), (94, 3)),
         ((82, 0), (96, 0), (104, 0)),
         ((84, 3), (98, 0), (110, 3))),
        (((58, 0), (65, 3), (75, 3)),
         ((62, 3), (76, 0), (86, 3)),
         ((64, 3), (82, 0), (96, 0))),
    ),
    (  # face 14
        (((85, 0), (87, 0), (83, 3)),
         ((101, 0), (102, 3), (100, 3)),
         ((107, 3), (112, 3), (114, 3))),
        (((66, 0), (67, 3), (70, 3)),
         ((81, 0), (85, 0), (87, 0)),
         ((94, 3), (101, 0), (102, 3))),
        (((49, 0), (48, 3), (50, 3)),
         ((61, 3), (66, 0), (67, 3)),
         ((75, 3), (81, 0), (85, 0))),
    ),
    (  # face 15
        (((95, 0), (92, 0), (83, 0)),
         ((79, 0), (78, 0), (74, 3)),
         ((63, 1), (59, 3), (57, 3))),
        (((109, 0), (108, 0), (100, 5)),
         ((93, 1), (95, 0), (92, 0)),
         ((77, 1), (79, 0), (78, 0))),
        (((117, 4), (118, 5), (114, 5)),
         ((106, 1), (109, 0), (108, 0)),
         ((90, 1), (93, 1), (95, 0))),
    ),
    (  # face 16
        (((90, 0), (77, 0), (63, 0)),
         ((80, 0), (68, 0), (56, 3)),
         ((72, 1), (60, 3), (46, 3))),
        (((106, 0), (93, 0), (79, 5)),
         ((99, 1), (90, 0), (77, 0)),
         ((88, 1), (80, 0), (68, 0))),
        (((117, 3), (109, 5), (95, 5)),
         ((113, 1), (106, 0), (93, 0)),
         ((105, 1), (99, 1), (90, 0))),
    ),
    (  # face 17
        (((105, 0), (88, 0), (72, 0)),
         ((103, 0), (91, 0), (73, 3)),
         ((97, 1), (89, 3), (71, 3))),
        (((113, 0), (99, 0), (80, 5)),
         ((116, 1), (105, 0), (88, 0)),
         ((111, 1), (103, 0), (91, 0))),
        (((117, 2), (106, 5), (90, 5)),
         ((121, 1), (113, 0), (99, 0)),
         ((119, 1), (116, 1), (105, 0))),
    ),
    (  # face 18
        (((119, 0), (111, 0), (97, 0)),
         ((115, 0), (110, 0), (98, 3)),
         ((107, 1), (104, 3), (96, 3))),
        (((121, 0), (116, 0), (103, 5)),
         ((120, 1), (119, 0), (111, 0)),
         ((112, 1), (115, 0), (110, 0))),
        (((117, 1), (113, 5), (105, 5)),
         ((118, 1), (121, 0), (116, 0)),
         ((114, 1), (120, 1), (119, 0))),
    ),
    (  # face 19
        (((114, 0), (112, 0), (107, 0)),
         ((100, 0), (102, 0), (101, 3)),
         ((83, 1), (87, 3), (85, 3))),
        (((118, 0), (120, 0), (115, 5)),
         ((108, 1), (114, 0), (112, 0)),
         ((92, 1), (100, 0), (102, 0))),
        (((117, 0), (121, 5), (119, 5)),
         ((109, 1), (118, 0), (120, 0)),
         ((95, 1), (108, 1), (114, 0))),
    ),
)


def _orient(face: int, translate: Tuple[int, int, int], ccw_rot60: int) -> FaceOrientIJK:
    return FaceOrientIJK(face, CoordIJK(*translate), ccw_rot60)


# For each face: central, IJ, KI and JK quadrant neighbors
FACE_NEIGHBORS: Tuple[Tuple[FaceOrientIJK, ...], ...] = (
    # polar cap, north
    (_orient(0, (0, 0, 0), 0), _orient(4, (2, 0, 2), 1), _orient(1, (2, 2, 0), 5), _orient(5, (0, 2, 2), 3)),
    (_orient(1, (0, 0, 0), 0), _orient(0, (2, 0, 2), 1), _orient(2, (2, 2, 0), 5), _orient(6, (0, 2, 2), 3)),
    (_orient(2, (0, 0, 0), 0), _orient(1, (2, 0, 2), 1), _orient(3, (2, 2, 0), 5), _orient(7, (0, 2, 2), 3)),
    (_orient(3, (0, 0, 0), 0), _orient(2, (2, 0, 2), 1), _orient(4, (2, 2, 0), 5), _orient(8, (0, 2, 2), 3)),
    (_orient(4, (0, 0, 0), 0), _orient(3, (2, 0, 2), 1), _orient(0, (2, 2, 0), 5), _orient(9, (0, 2, 2), 3)),
    # equatorial band, north side
    (_orient(5, (0, 0, 0), 0), _orient(10, (2, 2, 0), 3), _orient(14, (2, 0, 2), 3), _orient(0, (0, 2, 2), 3)),
    (_orient(6, (0, 0, 0), 0), _orient(11, (2, 2, 0), 3), _orient(10, (2, 0, 2), 3), _orient(1, (0, 2, 2), 3)),
    (_orient(7, (0, 0, 0), 0), _orient(12, (2, 2, 0), 3), _orient(11, (2, 0, 2), 3), _orient(2, (0, 2, 2), 3)),
    (_orient(8, (0, 0, 0), 0), _orient(13, (2, 2, 0), 3), _orient(12, (2, 0, 2), 3), _orient(3, (0, 2, 2), 3)),
    (_orient(9, (0, 0, 0), 0), _orient(14, (2, 2, 0), 3), _orient(13, (2, 0, 2), 3), _orient(4, (0, 2, 2), 3)),
    # equatorial band, south side
    (_orient(10, (0, 0, 0), 0), _orient(5, (2, 2, 0), 3), _orient(6, (2, 0, 2), 3), _orient(15, (0, 2, 2), 3)),
    (_orient(11, (0, 0, 0), 0), _orient(6, (2, 2, 0), 3), _orient(7, (2, 0, 2), 3), _orient(16, (0, 2, 2), 3)),
    (_orient(12, (0, 0, 0), 0), _orient(7, (2, 2, 0), 3), _orient(8, (2, 0, 2), 3), _orient(17, (0, 2, 2), 3)),
    (_orient(13, (0, 0, 0), 0), _orient(8, (2, 2, 0), 3), _orient(9, (2, 0, 2), 3), _orient(18, (0, 2, 2), 3)),
    (_orient(14, (0, 0, 0), 0), _orient(9, (2, 2, 0), 3), _orient(5, (2, 0, 2), 3), _orient(19, (0, 2, 2), 3)),
    # polar cap, south
    (_orient(15, (0, 0, 0), 0), _orient(16, (2, 0, 2), 1), _orient(19, (2, 2, 0), 5), _orient(10, (0, 2, 2), 3)),
    (_orient(16, (0, 0, 0), 0), _orient(17, (2, 0, 2), 1), _orient(15, (2, 2, 0), 5), _orient(11, (0, 2, 2), 3)),
    (_orient(17, (0, 0, 0), 0), _orient(18, (2, 0, 2), 1), _orient(16, (2, 2, 0), 5), _orient(12, (0, 2, 2), 3)),
    (_orient(18, (0, 0, 0), 0), _orient(19, (2, 0, 2), 1), _orient(17, (2, 2, 0), 5), _orient(13, (0, 2, 2), 3)),
    (_orient(19, (0, 0, 0), 0), _orient(15, (2, 0, 2), 1), _orient(18, (2, 2, 0), 5), _orient(14, (0, 2, 2), 3)),
)


def _clamp(value: int) -> int:
    return max(0, min(2, value))


def place_at_resolution_zero(fijk: FaceIJK) -> Tuple[int, int]:
    """
    Look up the base cell at a resolution 0 face position.

    Args:
        fijk: Face and normalized resolution 0 IJK; components are clamped to [0, 2]

    Returns:
        (base cell number, ccw 60 degree rotations into the base cell's frame)
    """
    if not 0 <= fijk.face < NUM_ICOSA_FACES:
        raise InternalError(f"face {fijk.face} outside icosahedron table")
    i, j, k = fijk.coord
    return FACE_IJK_BASE_CELLS[fijk.face][_clamp(i)][_clamp(j)][_clamp(k)]


def _base_cell(base_cell: int) -> BaseCell:
    if not 0 <= base_cell < NUM_BASE_CELLS:
        raise InternalError(f"base cell {base_cell} outside table")
    return BASE_CELLS[base_cell]


def is_pentagon(base_cell: int) -> bool:
    return _base_cell(base_cell).is_pentagon


def home_face_ijk(base_cell: int) -> FaceIJK:
    """Home face and resolution 0 IJK of a base cell."""
    cell = _base_cell(base_cell)
    return FaceIJK(cell.face, cell.home)


def is_cw_offset_face(base_cell: int, face: int) -> bool:
    """Whether a pentagon base cell rotates clockwise onto this face."""
    return face in _base_cell(base_cell).cw_offset_faces


def cross_face(fijk: FaceIJK, res: int, pent_leading_4: bool,
               substrate: bool = False) -> Tuple[FaceIJK, Overage]:
    """
    Move Class II coordinates that overflow their face onto the adjacent face.

    Args:
        fijk: Face and IJK at a Class II resolution
        res: Class II resolution of the coordinates
        pent_leading_4: The cell is a pentagon whose leading digit is I_AXES;
            such cells are pre-rotated clockwise in the KI quadrant
        substrate: Coordinates are on the 3x vertex substrate grid

    Returns:
        (possibly moved FaceIJK, overage status)
    """
    face, ijk = fijk
    max_dim = MAX_DIM_BY_CII_RES[res]
    unit_scale = UNIT_SCALE_BY_CII_RES[res]
    if max_dim < 0:
        raise InternalError(f"resolution {res} is not Class II")
    if substrate:
        max_dim *= 3
        unit_scale *= 3

    total = ijk.i + ijk.j + ijk.k
    if substrate and total == max_dim:
        return fijk, Overage.FACE_EDGE
    if total <= max_dim:
        return fijk, Overage.NO_OVERAGE

    if ijk.k > 0:
        if ijk.j > 0:
            orient = FACE_NEIGHBORS[face][JK]
        else:
            orient = FACE_NEIGHBORS[face][KI]
            if pent_leading_4:
                origin = CoordIJK(max_dim, 0, 0)
                ijk = add(rotate60cw(sub(ijk, origin)), origin)
    else:
        orient = FACE_NEIGHBORS[face][IJ]

    for _ in range(orient.ccw_rot60):
        ijk = rotate60ccw(ijk)
    ijk = normalize(add(ijk, scale(orient.translate, unit_scale)))

    overage = Overage.NEW_FACE
    if substrate and ijk.i + ijk.j + ijk.k == max_dim:
        overage = Overage.FACE_EDGE
    return FaceIJK(orient.face, ijk), overage
