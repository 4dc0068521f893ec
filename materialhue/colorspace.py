"""Color space conversions and small numeric helpers.

Colors are handled as ``(alpha, red, green, blue)`` tuples of integers
in the range 0..255.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Argb = Tuple[int, int, int, int]
Vector3 = Tuple[float, float, float]
Matrix3 = Tuple[Vector3, Vector3, Vector3]

SRGB_TO_XYZ: Matrix3 = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: Matrix3 = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

XYZ_TO_CAM16RGB: Matrix3 = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ: Matrix3 = (
    (1.8620678, -1.0112547, 0.14918678),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.0499644),
)

WHITE_POINT_D65: Vector3 = (95.047, 100.0, 108.883)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def matrix_multiply(row: Sequence[float], matrix: Sequence[Sequence[float]]) -> Vector3:
    """Multiply a 3x3 matrix by a column vector."""
    a, b, c = (
        row_m[0] * row[0] + row_m[1] * row[1] + row_m[2] * row[2] for row_m in matrix
    )
    return (a, b, c)


def sanitize_degrees(degrees: float) -> float:
    """Return the coterminal angle in [0, 360)."""
    result = degrees % 360.0
    return 0.0 if result >= 360.0 else result


def difference_degrees(a: float, b: float) -> float:
    """Distance between two angles in degrees, at most 180."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """Sign of the shortest rotation from one angle to another: 1.0 or -1.0."""
    increasing = sanitize_degrees(to_degrees - from_degrees)
    return 1.0 if increasing <= 180.0 else -1.0


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation between start and stop."""
    return (1.0 - amount) * start + amount * stop


def linearized(rgb_component: int) -> float:
    """Convert an sRGB channel (0..255) to a linear channel (0..100)."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """Convert a linear channel (0..100) to an sRGB channel (0..255)."""
    normalized = rgb_component / 100.0
    if math.isnan(normalized):
        return 0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return max(0, min(255, math.floor(value * 255.0 + 0.5)))


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.copysign(abs(t) ** (1.0 / 3.0), t)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def y_from_lstar(lstar: float) -> float:
    """Convert L* to the Y of XYZ (0..100)."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert the Y of XYZ (0..100) to L*."""
    return _lab_f(y / 100.0) * 116.0 - 16.0


def xyz_from_argb(argb: Argb) -> Vector3:
    """Convert a color to XYZ."""
    _, red, green, blue = argb
    return matrix_multiply(
        (linearized(red), linearized(green), linearized(blue)), SRGB_TO_XYZ
    )


def argb_from_linrgb(linrgb: Sequence[float]) -> Argb:
    """Convert linear RGB components (0..100) to an opaque color."""
    r, g, b = (delinearized(component) for component in linrgb)
    return (255, r, g, b)


def argb_from_xyz(xyz: Sequence[float]) -> Argb:
    """Convert XYZ to an opaque color."""
    return argb_from_linrgb(matrix_multiply(xyz, XYZ_TO_SRGB))


def lstar_from_argb(argb: Argb) -> float:
    """L* of a color."""
    return lstar_from_y(xyz_from_argb(argb)[1])


def argb_from_lstar(lstar: float) -> Argb:
    """The gray color with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return (255, component, component, component)


def lab_from_argb(argb: Argb) -> Vector3:
    """Convert a color to L*a*b*."""
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> Argb:
    """Convert L*a*b* to an opaque color."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    xyz = (
        _lab_invf(fx) * WHITE_POINT_D65[0],
        _lab_invf(fy) * WHITE_POINT_D65[1],
        _lab_invf(fz) * WHITE_POINT_D65[2],
    )
    return argb_from_xyz(xyz)