"""Triangle primitive with precomputed edge basis.

A triangle is defined by three vertices ``p0, p1, p2``. Intersection uses
values derived once by :func:`preprocess_triangle`:

    u  = p1 - p0            v  = p2 - p0
    normal = u x v
    uu = u . u   uv = u . v   vv = v . v
    dn = uv^2 - uu * vv

The ray first hits the triangle's supporting plane; the hit point is then
expressed in the (u, v) edge basis with ``w = P - p0``:

    s1 = (uv * (w . v) - vv * (w . u)) / dn
    s2 = (uv * (w . u) - uu * (w . v)) / dn

and the point lies inside the triangle iff ``0 <= s1 <= 1``, ``s2 >= 0`` and
``s1 + s2 <= 1``.

A zero-area triangle (collinear or coincident vertices) has a zero normal
and ``dn == 0``. It is a valid primitive but never reports a hit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whitted.core.color import WHITE, Color
from whitted.core.vector import Vector, add, cross, dot, length_squared, negate, scale, sub, to_rect
from whitted.geometry.surface import DEGENERATE_EPSILON, PARALLEL_EPSILON, check_surface


@dataclass(eq=False)
class Triangle:
    """A triangle with derived intersection fields.

    Attributes:
        p0: First vertex.
        p1: Second vertex.
        p2: Third vertex.
        color: Surface color.
        specularity: Mirror weight in [0, 255].
        normal: Face normal ``u x v`` (unnormalized). None until preprocessed.
        u: Edge ``p1 - p0``.
        v: Edge ``p2 - p0``.
        uu: ``u . u``.
        uv: ``u . v``.
        vv: ``v . v``.
        dn: ``uv^2 - uu * vv``; zero for a degenerate triangle.
    """

    p0: Vector
    p1: Vector
    p2: Vector
    color: Color = WHITE
    specularity: int = 0
    normal: Vector | None = field(default=None, init=False, repr=False)
    u: Vector | None = field(default=None, init=False, repr=False)
    v: Vector | None = field(default=None, init=False, repr=False)
    uu: float = field(default=0.0, init=False, repr=False)
    uv: float = field(default=0.0, init=False, repr=False)
    vv: float = field(default=0.0, init=False, repr=False)
    dn: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.p0 = to_rect(self.p0)
        self.p1 = to_rect(self.p1)
        self.p2 = to_rect(self.p2)
        self.color = check_surface(self.color, self.specularity)

    @property
    def is_preprocessed(self) -> bool:
        return self.normal is not None

    @property
    def is_degenerate(self) -> bool:
        """True if the triangle has zero area.

        Raises:
            RuntimeError: If the triangle has not been preprocessed.
        """
        _require_preprocessed(self)
        return length_squared(self.normal) < DEGENERATE_EPSILON or abs(self.dn) < DEGENERATE_EPSILON


def _require_preprocessed(tri: Triangle) -> None:
    if tri.normal is None:
        raise RuntimeError("Triangle has not been preprocessed; call preprocess(scene) first")


def preprocess_triangle(tri: Triangle) -> None:
    """Compute the triangle's derived intersection fields in place.

    Recomputing from the same vertices yields the same values, so calling
    this more than once is harmless.
    """
    u = sub(tri.p1, tri.p0)
    v = sub(tri.p2, tri.p0)
    uu = dot(u, u)
    uv = dot(u, v)
    vv = dot(v, v)
    tri.u = u
    tri.v = v
    tri.uu = uu
    tri.uv = uv
    tri.vv = vv
    tri.dn = uv * uv - uu * vv
    tri.normal = cross(u, v)


def triangle_barycentric(tri: Triangle, point: Vector) -> tuple[float, float]:
    """Express ``point`` in the triangle's edge basis.

    Args:
        tri: A preprocessed, non-degenerate triangle.
        point: A point in the triangle's plane.

    Returns:
        ``(s1, s2)`` such that ``point = p0 + s1 * u + s2 * v``.

    Raises:
        RuntimeError: If the triangle has not been preprocessed.
        ValueError: If the triangle is degenerate.
    """
    if tri.is_degenerate:
        raise ValueError("Degenerate triangle has no edge basis")
    w = sub(to_rect(point), tri.p0)
    wu = dot(w, tri.u)
    wv = dot(w, tri.v)
    s1 = (tri.uv * wv - tri.vv * wu) / tri.dn
    s2 = (tri.uv * wu - tri.uu * wv) / tri.dn
    return s1, s2


def hit_triangle(origin: Vector, direction: Vector, tri: Triangle) -> float | None:
    """Test for ray-triangle intersection.

    Args:
        origin: The starting point of the ray.
        direction: The direction of the ray.
        tri: A preprocessed triangle.

    Returns:
        The ray parameter ``t > 0`` of the hit, or None if the ray misses,
        runs parallel to the triangle, or the triangle is degenerate.

    Raises:
        RuntimeError: If the triangle has not been preprocessed.
    """
    if tri.is_degenerate:
        return None

    denom = dot(tri.normal, direction)
    if abs(denom) < PARALLEL_EPSILON:
        return None
    t = dot(tri.normal, sub(tri.p0, origin)) / denom
    if t <= 0.0:
        return None

    point = add(to_rect(origin), scale(to_rect(direction), t))
    s1, s2 = triangle_barycentric(tri, point)
    if s1 < 0.0 or s1 > 1.0 or s2 < 0.0 or s1 + s2 > 1.0:
        return None
    return t


def triangle_normal(tri: Triangle, point: Vector) -> Vector:
    """The negated face normal (unnormalized)."""
    _require_preprocessed(tri)
    return negate(tri.normal)
