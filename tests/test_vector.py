"""Unit tests for the dual-representation vector module.

Tests cover:
- Rectangular <-> spherical conversion and round trips
- Representation handling of add/sub/negate/scale
- Dot and cross products on mixed representations
- Normalization and its zero-length precondition
- Operator overloads
"""

import math

import pytest

from whitted.core.vector import (
    Representation,
    add,
    cross,
    dot,
    is_close,
    length,
    negate,
    normalize,
    scale,
    spherical,
    sub,
    to_rect,
    to_sph,
    vec3,
)


class TestConversion:
    """Tests for representation conversion."""

    def test_spherical_to_rect_formula(self):
        """Test x = r cos(el) sin(az), y = r sin(el), z = r cos(el) cos(az)."""
        r, el, az = 2.0, 0.3, 1.1
        v = to_rect(spherical(r, el, az))

        assert v.rep == Representation.RECT
        assert v.x == pytest.approx(r * math.cos(el) * math.sin(az))
        assert v.y == pytest.approx(r * math.sin(el))
        assert v.z == pytest.approx(r * math.cos(el) * math.cos(az))

    def test_rect_to_spherical_of_axes(self):
        """Test that +z has azimuth 0 and +x has azimuth pi/2."""
        z_axis = to_sph(vec3(0.0, 0.0, 1.0))
        x_axis = to_sph(vec3(1.0, 0.0, 0.0))
        y_axis = to_sph(vec3(0.0, 1.0, 0.0))

        assert z_axis.components == pytest.approx((1.0, 0.0, 0.0))
        assert x_axis.components == pytest.approx((1.0, 0.0, math.pi / 2))
        assert y_axis.components[1] == pytest.approx(math.pi / 2)

    @pytest.mark.parametrize(
        "xyz",
        [
            (1.0, 2.0, 3.0),
            (-1.0, 0.5, -2.0),
            (0.0, 0.0, 1.0),
            (0.0, -3.0, 0.0),
            (-4.0, 0.0, 0.0),
            (1e-3, -2e-3, 5e-4),
        ],
    )
    def test_rect_round_trip(self, xyz):
        """Test that rect -> sph -> rect reproduces the original vector."""
        v = vec3(*xyz)
        back = to_rect(to_sph(v))

        assert back.components == pytest.approx(xyz, abs=1e-12)

    @pytest.mark.parametrize(
        "sph",
        [
            (1.0, 0.0, 0.0),
            (2.0, 0.3, 1.2),
            (5.0, -1.2, -2.5),
            (0.5, 1.5, 3.0),
        ],
    )
    def test_spherical_round_trip(self, sph):
        """Test that sph -> rect -> sph reproduces the original vector."""
        back = to_sph(to_rect(spherical(*sph)))

        assert back.components == pytest.approx(sph, abs=1e-12)

    def test_conversion_is_identity_on_same_representation(self):
        """Test that converting to the current representation returns the same value."""
        v = vec3(1.0, 2.0, 3.0)
        s = spherical(1.0, 0.2, 0.4)

        assert to_rect(v) is v
        assert to_sph(s) is s

    def test_zero_vector_to_spherical(self):
        """Test that the zero vector converts to (0, 0, 0)."""
        assert to_sph(vec3(0.0, 0.0, 0.0)).components == (0.0, 0.0, 0.0)


class TestArithmetic:
    """Tests for arithmetic and representation preservation."""

    def test_add_rect(self):
        """Test rectangular addition."""
        result = add(vec3(1.0, 2.0, 3.0), vec3(4.0, 5.0, 6.0))

        assert result.rep == Representation.RECT
        assert result.components == (5.0, 7.0, 9.0)

    def test_add_keeps_left_spherical_representation(self):
        """Test that adding to a spherical vector yields a spherical vector."""
        a = spherical(1.0, 0.0, 0.0)  # (0, 0, 1)
        b = vec3(1.0, 0.0, 0.0)

        result = add(a, b)

        assert result.rep == Representation.SPH
        assert result.r == pytest.approx(math.sqrt(2.0))
        assert result.elevation == pytest.approx(0.0)
        assert result.azimuth == pytest.approx(math.pi / 4)

    def test_add_rect_plus_spherical_is_rect(self):
        """Test that a rectangular left operand keeps the result rectangular."""
        result = add(vec3(1.0, 0.0, 0.0), spherical(1.0, 0.0, 0.0))

        assert result.rep == Representation.RECT
        assert result.components == pytest.approx((1.0, 0.0, 1.0))

    def test_sub(self):
        """Test subtraction."""
        result = sub(vec3(4.0, 5.0, 6.0), vec3(1.0, 1.0, 1.0))

        assert result.components == (3.0, 4.0, 5.0)

    def test_negate_spherical_matches_rect_negation(self):
        """Test that negating a spherical vector negates its rectangular form."""
        s = spherical(2.0, 0.3, 1.2)

        neg = negate(s)

        assert neg.rep == Representation.SPH
        assert is_close(neg, negate(to_rect(s)))

    def test_scale_spherical_scales_radius(self):
        """Test that scaling a spherical vector only scales its radius."""
        s = spherical(2.0, 0.3, 1.2)

        scaled = scale(s, 3.0)

        assert scaled.rep == Representation.SPH
        assert scaled.components == pytest.approx((6.0, 0.3, 1.2))

    def test_operators(self):
        """Test the operator overloads."""
        a = vec3(1.0, 2.0, 3.0)
        b = vec3(1.0, 1.0, 1.0)

        assert (a + b).components == (2.0, 3.0, 4.0)
        assert (a - b).components == (0.0, 1.0, 2.0)
        assert (-a).components == (-1.0, -2.0, -3.0)
        assert (a * 2.0).components == (2.0, 4.0, 6.0)
        assert (2.0 * a).components == (2.0, 4.0, 6.0)
        assert (a / 2.0).components == (0.5, 1.0, 1.5)

    def test_division_by_zero_raises(self):
        """Test that dividing by zero raises."""
        with pytest.raises(ZeroDivisionError):
            vec3(1.0, 0.0, 0.0) / 0.0

    def test_multiply_by_vector_raises(self):
        """Test that vector * vector is rejected."""
        with pytest.raises(TypeError):
            vec3(1.0, 0.0, 0.0) * vec3(1.0, 0.0, 0.0)

    def test_unpacking_yields_rectangular_components(self):
        """Test that iterating a spherical vector yields x, y, z."""
        x, y, z = spherical(1.0, 0.0, math.pi / 2)

        assert (x, y, z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot(self):
        """Test the dot product."""
        assert dot(vec3(1.0, 2.0, 3.0), vec3(4.0, -5.0, 6.0)) == 12.0

    def test_dot_converts_spherical_operands(self):
        """Test that dot works on spherical inputs without mutating them."""
        s = spherical(2.0, 0.0, 0.0)  # (0, 0, 2)

        assert dot(s, vec3(0.0, 0.0, 3.0)) == pytest.approx(6.0)
        assert s.rep == Representation.SPH

    def test_cross_right_handed(self):
        """Test that x cross y = z."""
        result = cross(vec3(1.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0))

        assert result.components == (0.0, 0.0, 1.0)

    def test_cross_of_spherical_is_rect(self):
        """Test that cross products are always rectangular."""
        result = cross(spherical(1.0, 0.0, math.pi / 2), vec3(0.0, 1.0, 0.0))

        assert result.rep == Representation.RECT
        assert result.components == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)


class TestNormalize:
    """Tests for length and normalization."""

    def test_length(self):
        """Test Euclidean length."""
        assert length(vec3(3.0, 4.0, 0.0)) == 5.0
        assert length(spherical(-2.0, 0.1, 0.2)) == 2.0

    def test_normalize_rect(self):
        """Test normalizing a rectangular vector."""
        n = normalize(vec3(0.0, 3.0, 4.0))

        assert n.components == pytest.approx((0.0, 0.6, 0.8))

    def test_normalize_keeps_spherical(self):
        """Test that normalizing a spherical vector keeps its angles."""
        n = normalize(spherical(5.0, 0.3, 0.7))

        assert n.rep == Representation.SPH
        assert n.components == pytest.approx((1.0, 0.3, 0.7))

    def test_normalize_zero_vector_raises(self):
        """Test that normalizing the zero vector fails loudly."""
        with pytest.raises(ValueError, match="Cannot normalize"):
            normalize(vec3(0.0, 0.0, 0.0))

    def test_normalize_nan_raises(self):
        """Test that NaN components are not propagated."""
        with pytest.raises(ValueError):
            normalize(vec3(float("nan"), 0.0, 0.0))
