"""Dual-representation 3D vector type and vector utilities.

A Vector carries an explicit representation tag: either rectangular
(Cartesian) components ``(x, y, z)`` or spherical components
``(r, elevation, azimuth)``. Directions that get rotated between frames
(camera view direction, light direction) are kept in spherical form so that
elevation and azimuth can be adjusted independently; everything that needs
Cartesian math converts on the fly.

Conversions:
    spherical -> rectangular:
        x = r * cos(elevation) * sin(azimuth)
        y = r * sin(elevation)
        z = r * cos(elevation) * cos(azimuth)
    rectangular -> spherical:
        r = |v|
        elevation = atan2(y, sqrt(x^2 + z^2))
        azimuth = atan2(x, z)

The azimuth is measured from +z toward +x so that the two conversions are
exact inverses of each other.

Binary operations that mix representations compute in rectangular form and
hand back the representation of the left operand. Dot and cross products
always operate on rectangular copies; inputs are never mutated (vectors are
immutable values).

Example:
    >>> from whitted.core.vector import vec3, to_sph, dot
    >>> v = vec3(0.0, 1.0, 1.0)
    >>> s = to_sph(v)
    >>> round(s.r, 6)
    1.414214
    >>> round(s.elevation, 6)
    0.785398
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class Representation(IntEnum):
    """Coordinate system a Vector's components are expressed in."""

    RECT = 0
    SPH = 1


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 3D vector tagged with its representation.

    Attributes:
        rep: Which coordinate system ``components`` is expressed in.
        components: ``(x, y, z)`` for RECT, ``(r, elevation, azimuth)``
            for SPH. Angles are in radians.
    """

    rep: Representation
    components: tuple[float, float, float]

    # -------------------------------------------------------------------------
    # Component access (converted on demand)
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return to_rect(self).components[0]

    @property
    def y(self) -> float:
        return to_rect(self).components[1]

    @property
    def z(self) -> float:
        return to_rect(self).components[2]

    @property
    def r(self) -> float:
        return length(self)

    @property
    def elevation(self) -> float:
        return to_sph(self).components[1]

    @property
    def azimuth(self) -> float:
        return to_sph(self).components[2]

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector) -> Vector:
        return add(self, other)

    def __sub__(self, other: Vector) -> Vector:
        return sub(self, other)

    def __neg__(self) -> Vector:
        return negate(self)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            raise TypeError("Vector can only be multiplied by a scalar")
        return scale(self, scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Vector")
        return scale(self, 1.0 / scalar)

    def __iter__(self):
        """Iterate over the rectangular components."""
        return iter(to_rect(self).components)


# =============================================================================
# Construction
# =============================================================================


def vec3(x: float, y: float, z: float) -> Vector:
    """Create a rectangular vector."""
    return Vector(Representation.RECT, (float(x), float(y), float(z)))


def spherical(r: float, elevation: float, azimuth: float) -> Vector:
    """Create a spherical vector.

    Args:
        r: Radius (magnitude).
        elevation: Angle above the xz-plane in radians.
        azimuth: Angle in the xz-plane in radians, measured so that
            azimuth 0 points along +z.
    """
    return Vector(Representation.SPH, (float(r), float(elevation), float(azimuth)))


ZERO = vec3(0.0, 0.0, 0.0)


# =============================================================================
# Representation Conversion
# =============================================================================


def to_rect(v: Vector) -> Vector:
    """Return ``v`` in rectangular form (``v`` itself if already RECT)."""
    if v.rep == Representation.RECT:
        return v
    r, elevation, azimuth = v.components
    cos_el = math.cos(elevation)
    return Vector(
        Representation.RECT,
        (
            r * cos_el * math.sin(azimuth),
            r * math.sin(elevation),
            r * cos_el * math.cos(azimuth),
        ),
    )


def to_sph(v: Vector) -> Vector:
    """Return ``v`` in spherical form (``v`` itself if already SPH).

    The zero vector maps to ``(0, 0, 0)``.
    """
    if v.rep == Representation.SPH:
        return v
    x, y, z = v.components
    return Vector(
        Representation.SPH,
        (
            math.sqrt(x * x + y * y + z * z),
            math.atan2(y, math.sqrt(x * x + z * z)),
            math.atan2(x, z),
        ),
    )


def _as(v: Vector, rep: Representation) -> Vector:
    return to_sph(v) if rep == Representation.SPH else to_rect(v)


# =============================================================================
# Arithmetic
# =============================================================================


def add(a: Vector, b: Vector) -> Vector:
    """Compute ``a + b`` in the representation of ``a``."""
    ax, ay, az = to_rect(a).components
    bx, by, bz = to_rect(b).components
    return _as(vec3(ax + bx, ay + by, az + bz), a.rep)


def negate(v: Vector) -> Vector:
    """Negate a vector.

    Rectangular vectors flip every component; spherical vectors negate the
    radius, which converts back to the same rectangular negation.
    """
    c0, c1, c2 = v.components
    if v.rep == Representation.SPH:
        return Vector(Representation.SPH, (-c0, c1, c2))
    return Vector(Representation.RECT, (-c0, -c1, -c2))


def sub(a: Vector, b: Vector) -> Vector:
    """Compute ``a - b`` in the representation of ``a``."""
    return add(a, negate(b))


def scale(v: Vector, s: float) -> Vector:
    """Multiply a vector by a scalar, keeping its representation."""
    c0, c1, c2 = v.components
    if v.rep == Representation.SPH:
        return Vector(Representation.SPH, (c0 * s, c1, c2))
    return Vector(Representation.RECT, (c0 * s, c1 * s, c2 * s))


def dot(a: Vector, b: Vector) -> float:
    """Dot product, computed on rectangular copies of the inputs."""
    ax, ay, az = to_rect(a).components
    bx, by, bz = to_rect(b).components
    return ax * bx + ay * by + az * bz


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product ``a x b``. The result is always rectangular."""
    ax, ay, az = to_rect(a).components
    bx, by, bz = to_rect(b).components
    return vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def length_squared(v: Vector) -> float:
    if v.rep == Representation.SPH:
        return v.components[0] * v.components[0]
    x, y, z = v.components
    return x * x + y * y + z * z


def length(v: Vector) -> float:
    """Euclidean magnitude. For spherical vectors this is ``|r|``."""
    if v.rep == Representation.SPH:
        return abs(v.components[0])
    return math.sqrt(length_squared(v))


def normalize(v: Vector) -> Vector:
    """Scale a vector to unit length, keeping its representation.

    Args:
        v: A vector with nonzero magnitude.

    Returns:
        The unit vector pointing the same way as ``v``.

    Raises:
        ValueError: If ``v`` has zero (or non-finite) length. Callers must
            guarantee a nonzero magnitude; letting NaNs through would
            corrupt every pixel that shades through this vector.
    """
    mag = length(v)
    if mag == 0.0 or not math.isfinite(mag):
        raise ValueError(f"Cannot normalize vector with length {mag}: {v}")
    return scale(v, 1.0 / mag)


def is_close(a: Vector, b: Vector, tol: float = 1e-9) -> bool:
    """Compare two vectors in rectangular form within an absolute tolerance."""
    return all(abs(p - q) <= tol for p, q in zip(to_rect(a).components, to_rect(b).components))
