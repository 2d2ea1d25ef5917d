"""
Icosahedron faces and the gnomonic projection between the sphere and the
planar hex2d frame of each face.

Each face has a center (lat/lng and unit vector) and a Class II i-axis
azimuth. Class III resolutions are rotated by M_AP7_ROT_RADS from Class II.
"""
import math
from typing import Tuple

from .coords import Vec2d, is_class_iii
from .errors import InternalError
from .geometry import (
    EPSILON,
    Vec3d,
    azimuth,
    destination,
    point_square_dist,
    pos_angle,
    to_unit_vector,
)

NUM_ICOSA_FACES = 20

# Scaling factor from unit gnomonic length to hex2d units at resolution 0
RES0_U_GNOMONIC = 0.38196601125010500003
INV_RES0_U_GNOMONIC = 2.61803398874989588842

M_SQRT7 = 2.6457513110645905905
M_RSQRT7 = 0.3779644730092272272

# Rotation between Class II and Class III axes (asin(sqrt(3/28)))
M_AP7_ROT_RADS = 0.333473172251832115336090755351601070065900389

# Face center lat/lng, radians
FACE_CENTER_GEO: Tuple[Tuple[float, float], ...] = (
    (0.803582649718989942, 1.248397419617396099),  # 0
    (1.307747883455638156, 2.536945009877921159),  # 1
    (1.054751253523952054, -1.347517358900396623),  # 2
    (0.600191595538186799, -0.450603909469755746),  # 3
    (0.491715428198773866, 0.401988202911306943),  # 4
    (0.172745327415618701, 1.678146885280433686),  # 5
    (0.605929321571350690, 2.953923329812411617),  # 6
    (0.427370518328979641, -1.888876200336285401),  # 7
    (-0.079066118549212831, -0.733429513380867741),  # 8
    (-0.230961644455383637, 0.506495587332349035),  # 9
    (0.079066118549212831, 2.408163140208925497),  # 10
    (0.230961644455383637, -2.635097066257444203),  # 11
    (-0.172745327415618701, -1.463445768309359553),  # 12
    (-0.605929321571350690, -0.187669323777381622),  # 13
    (-0.427370518328979641, 1.252716453253507838),  # 14
    (-0.600191595538186799, 2.690988744120037492),  # 15
    (-0.491715428198773866, -2.739604450678486295),  # 16
    (-0.803582649718989942, -1.893195233972397139),  # 17
    (-1.307747883455638156, -0.604647643711872080),  # 18
    (-1.054751253523952054, 1.794075294689396615),  # 19
)

# Azimuth from each face center to its vertices 0/1/2 (Class II i/j/k axes), radians
FACE_AXES_AZ_RADS_CII: Tuple[Tuple[float, float, float], ...] = (
    (5.619958268523939882, 3.525563166130744542, 1.431168063737548730),  # 0
    (5.760339081714187279, 3.665943979320991689, 1.571548876927796127),  # 1
    (0.780213654393430055, 4.969003859179821079, 2.874608756786625655),  # 2
    (0.430469363979999913, 4.619259568766391033, 2.524864466373195467),  # 3
    (6.130269123335111400, 4.035874020941915804, 1.941478918548720291),  # 4
    (2.692877706530642877, 0.598482604137447119, 4.787272808923838195),  # 5
    (2.982963003477243874, 0.888567901084048369, 5.077358105870439581),  # 6
    (3.532912002790141181, 1.438516900396945656, 5.627307105183336758),  # 7
    (3.494305004259568154, 1.399909901866372864, 5.588700106652763840),  # 8
    (3.003214169499538391, 0.908819067106342928, 5.097609271892733906),  # 9
    (5.930472956509811562, 3.836077854116615875, 1.741682751723420374),  # 10
    (0.138378484090254847, 4.327168688876645809, 2.232773586483450311),  # 11
    (0.448714947059150361, 4.637505151845541521, 2.543110049452346120),  # 12
    (0.158629650112549365, 4.347419854898940135, 2.253024752505744869),  # 13
    (5.891865957979238535, 3.797470855586042958, 1.703075753192847583),  # 14
    (2.711123289609793325, 0.616728187216597771, 4.805518392002988683),  # 15
    (3.294508837434268316, 1.200113735041072948, 5.388903939827463911),  # 16
    (3.804819692245439833, 1.710424589852244509, 5.899214794638635174),  # 17
    (3.664438879055192436, 1.570043776661997111, 5.758833981448388027),  # 18
    (2.361378999196363184, 0.266983896803167583, 4.455774101589558636),  # 19
)

# Face centers as unit vectors
FACE_CENTER_POINT: Tuple[Vec3d, ...] = (
    Vec3d(0.2199307791404606, 0.6583691780274996, 0.7198475378926182),  # 0
    Vec3d(-0.2139234834501421, 0.1478171829550703, 0.9656017935214205),  # 1
    Vec3d(0.1092625278784797, -0.4811951572873210, 0.8697775121287253),  # 2
    Vec3d(0.7428567301586791, -0.3593941678278028, 0.5648005936517033),  # 3
    Vec3d(0.8112534709140969, 0.3448953237639384, 0.4721387736413930),  # 4
    Vec3d(-0.1055498149613921, 0.9794457296411413, 0.1718874610009365),  # 5
    Vec3d(-0.8075407579970092, 0.1533552485898818, 0.5695261994882688),  # 6
    Vec3d(-0.2846148069787907, -0.8644080972654206, 0.4144792552473539),  # 7
    Vec3d(0.7405621473854482, -0.6673299564565524, -0.0789837646326737),  # 8
    Vec3d(0.8512303986474293, 0.4722343788582681, -0.2289137388687808),  # 9
    Vec3d(-0.7405621473854481, 0.6673299564565524, 0.0789837646326737),  # 10
    Vec3d(-0.8512303986474292, -0.4722343788582682, 0.2289137388687808),  # 11
    Vec3d(0.1055498149613919, -0.9794457296411413, -0.1718874610009365),  # 12
    Vec3d(0.8075407579970092, -0.1533552485898819, -0.5695261994882688),  # 13
    Vec3d(0.2846148069787908, 0.8644080972654204, -0.4144792552473539),  # 14
    Vec3d(-0.7428567301586791, 0.3593941678278027, -0.5648005936517033),  # 15
    Vec3d(-0.8112534709140971, -0.3448953237639382, -0.4721387736413930),  # 16
    Vec3d(-0.2199307791404607, -0.6583691780274996, -0.7198475378926182),  # 17
    Vec3d(0.2139234834501420, -0.1478171829550704, -0.9656017935214205),  # 18
    Vec3d(-0.1092625278784796, 0.4811951572873210, -0.8697775121287253),  # 19
)


def _check_face(face: int) -> None:
    if not 0 <= face < NUM_ICOSA_FACES:
        raise InternalError(f"face {face} outside icosahedron table")


def nearest_face(v: Vec3d) -> Tuple[int, float]:
    """
    Find the face whose center is closest to a point on the unit sphere.

    Args:
        v: Unit vector

    Returns:
        (face, squared chord distance to that face's center). Ties keep the
        lowest face number.
    """
    face = 0
    # Squared distances between unit vectors never exceed 4
    min_sqd = 5.0
    for f in range(NUM_ICOSA_FACES):
        sqd = point_square_dist(FACE_CENTER_POINT[f], v)
        if sqd < min_sqd:
            face = f
            min_sqd = sqd
    return face, min_sqd


def to_face_local(face: int, lat: float, lng: float, res: int) -> Vec2d:
    """
    Project a geographic point into the hex2d frame of a face.

    Args:
        face: Icosahedron face
        lat: Latitude in radians
        lng: Longitude in radians
        res: Resolution that sets the hex2d unit length

    Returns:
        Vec2d in the face's Class II or Class III axes depending on res
    """
    _check_face(face)
    sqd = point_square_dist(FACE_CENTER_POINT[face], to_unit_vector(lat, lng))
    r = math.acos(1.0 - sqd * 0.5)
    if r < EPSILON:
        return Vec2d(0.0, 0.0)

    center_lat, center_lng = FACE_CENTER_GEO[face]
    theta = pos_angle(FACE_AXES_AZ_RADS_CII[face][0] - azimuth(center_lat, center_lng, lat, lng))
    if is_class_iii(res):
        theta = pos_angle(theta - M_AP7_ROT_RADS)

    # gnomonic scaling, then one factor of sqrt(7) per aperture step
    r = math.tan(r)
    r *= INV_RES0_U_GNOMONIC
    for _ in range(res):
        r *= M_SQRT7

    return Vec2d(r * math.cos(theta), r * math.sin(theta))


def from_face_local(face: int, v: Vec2d, res: int) -> Tuple[float, float]:
    """
    Inverse of to_face_local. Returns (lat, lng) in radians.
    """
    _check_face(face)
    center_lat, center_lng = FACE_CENTER_GEO[face]

    r = math.sqrt(v.x * v.x + v.y * v.y)
    if r < EPSILON:
        return center_lat, center_lng

    theta = math.atan2(v.y, v.x)
    for _ in range(res):
        r *= M_RSQRT7
    r *= RES0_U_GNOMONIC
    r = math.atan(r)

    if is_class_iii(res):
        theta = pos_angle(theta + M_AP7_ROT_RADS)
    theta = pos_angle(FACE_AXES_AZ_RADS_CII[face][0] - theta)

    return destination(center_lat, center_lng, theta, r)


def geo_to_hex2d(lat: float, lng: float, res: int) -> Tuple[int, Vec2d]:
    """Nearest face of a point together with its hex2d position on that face."""
    face, _ = nearest_face(to_unit_vector(lat, lng))
    return face, to_face_local(face, lat, lng, res)
