"""Unit tests for the camera model and between-frame camera controls.

Tests cover:
- Camera validation
- Pixel-to-ray mapping for both projections
- Screen orientation (left/right, up/down)
- Turning, advancing, zooming and mouse look
"""

import math

import pytest

from whitted.camera.camera import Camera, Projection, pixel_scale, pixel_to_ray
from whitted.camera.controls import (
    MOUSE_SENSITIVITY,
    TURN_STEP,
    advance,
    mouse_look,
    translate,
    turn,
    zoom,
)
from whitted.core.vector import Representation, length, to_sph, vec3
from whitted.scene.demo import DemoParams, create_demo_camera

WIDTH = 320
HEIGHT = 240


@pytest.fixture
def camera():
    return create_demo_camera()


class TestCameraValidation:
    """Tests for camera construction."""

    def test_zero_direction_rejected(self):
        """Test that the view direction must be nonzero."""
        with pytest.raises(ValueError, match="direction"):
            Camera(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 0.0), 1.0, 1.0)

    @pytest.mark.parametrize("fov", [0.0, -0.5, math.pi, 4.0])
    def test_bad_fov_rejected(self, fov):
        """Test that fields of view must lie in (0, pi)."""
        with pytest.raises(ValueError, match="fov_x"):
            Camera(vec3(0.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0), fov, 1.0)

    def test_demo_camera(self, camera):
        """Test the demo camera's placement and field of view."""
        assert camera.origin.components == (-5.0, 0.0, 0.0)
        assert camera.fov_x == pytest.approx(math.pi / 2)
        assert camera.fov_y == pytest.approx(math.pi / 2 * HEIGHT / WIDTH)
        assert camera.projection == Projection.ANGULAR


class TestPixelToRay:
    """Tests for mapping pixels to primary ray directions."""

    def test_center_pixel_is_view_direction(self, camera):
        """Test that the center pixel looks along the camera direction."""
        d = pixel_to_ray(camera, WIDTH // 2, HEIGHT // 2, WIDTH, HEIGHT)

        assert d.rep == Representation.RECT
        assert d.components == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)

    def test_angular_left_edge(self, camera):
        """Test that the left edge is half the horizontal FOV away."""
        d = pixel_to_ray(camera, 0, HEIGHT // 2, WIDTH, HEIGHT)

        assert d.components == pytest.approx((math.sqrt(0.5), 0.0, math.sqrt(0.5)), abs=1e-12)

    def test_perspective_left_edge(self):
        """Test the tangent scaling rule at the left edge."""
        cam = create_demo_camera(DemoParams(projection=Projection.PERSPECTIVE))

        d = pixel_to_ray(cam, 0, HEIGHT // 2, WIDTH, HEIGHT)

        assert d.components == pytest.approx((math.cos(0.5), 0.0, math.sin(0.5)), abs=1e-12)

    def test_projections_differ(self):
        """Test that the two projections give different corner rays."""
        angular = create_demo_camera(DemoParams(projection=Projection.ANGULAR))
        perspective = create_demo_camera(DemoParams(projection=Projection.PERSPECTIVE))

        a = pixel_to_ray(angular, 0, 0, WIDTH, HEIGHT)
        p = pixel_to_ray(perspective, 0, 0, WIDTH, HEIGHT)

        assert a.components != pytest.approx(p.components)

    def test_pixel_scale(self, camera):
        """Test the angular per-pixel scale."""
        sx, sy = pixel_scale(camera, WIDTH, HEIGHT)

        assert sx == pytest.approx(camera.fov_x / WIDTH)
        assert sy == pytest.approx(camera.fov_y / HEIGHT)

    def test_top_row_looks_up(self, camera):
        """Test that row 0 is above the horizon."""
        assert pixel_to_ray(camera, WIDTH // 2, 0, WIDTH, HEIGHT).y > 0.0
        assert pixel_to_ray(camera, WIDTH // 2, HEIGHT - 1, WIDTH, HEIGHT).y < 0.0

    def test_left_and_right_are_mirrored(self, camera):
        """Test that columns equidistant from center mirror in z."""
        left = pixel_to_ray(camera, WIDTH // 2 - 40, HEIGHT // 2, WIDTH, HEIGHT)
        right = pixel_to_ray(camera, WIDTH // 2 + 40, HEIGHT // 2, WIDTH, HEIGHT)

        assert left.z > 0.0
        assert right.z == pytest.approx(-left.z)
        assert right.x == pytest.approx(left.x)

    def test_length_follows_camera_direction(self):
        """Test that ray length equals the camera direction's length."""
        cam = Camera(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 3.0), 1.0, 0.75)

        d = pixel_to_ray(cam, 10, 20, 64, 48)

        assert length(d) == pytest.approx(3.0)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
    def test_pixel_out_of_range(self, camera, x, y):
        """Test that pixels outside the image are rejected."""
        with pytest.raises(ValueError, match="outside"):
            pixel_to_ray(camera, x, y, WIDTH, HEIGHT)

    def test_non_positive_size(self, camera):
        """Test that the image size must be positive."""
        with pytest.raises(ValueError):
            pixel_to_ray(camera, 0, 0, 0, HEIGHT)


class TestControls:
    """Tests for between-frame camera edits."""

    def test_turn_changes_azimuth(self, camera):
        """Test that turning rotates the direction and stores it spherical."""
        before = to_sph(camera.direction).azimuth

        turn(camera, d_azimuth=TURN_STEP)

        assert camera.direction.rep == Representation.SPH
        assert camera.direction.azimuth == pytest.approx(before + TURN_STEP)
        assert camera.direction.elevation == pytest.approx(0.0)

    def test_turned_camera_center_ray(self, camera):
        """Test that the center ray follows a turned camera."""
        turn(camera, d_azimuth=-math.pi / 2)

        d = pixel_to_ray(camera, WIDTH // 2, HEIGHT // 2, WIDTH, HEIGHT)

        assert d.components == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_advance(self, camera):
        """Test moving along the view direction."""
        advance(camera, 2.0)

        assert camera.origin.components == pytest.approx((-3.0, 0.0, 0.0))

    def test_translate(self, camera):
        """Test shifting the origin."""
        translate(camera, vec3(0.0, 1.0, 0.0))

        assert camera.origin.components == (-5.0, 1.0, 0.0)

    def test_zoom(self, camera):
        """Test widening the field of view keeps the aspect ratio."""
        zoom(camera, 0.1, HEIGHT / WIDTH)

        assert camera.fov_x == pytest.approx(math.pi / 2 + 0.1)
        assert camera.fov_y == pytest.approx((math.pi / 2 + 0.1) * HEIGHT / WIDTH)

    def test_zoom_out_of_range_leaves_camera(self, camera):
        """Test that an invalid zoom raises and changes nothing."""
        with pytest.raises(ValueError):
            zoom(camera, math.pi, HEIGHT / WIDTH)

        assert camera.fov_x == pytest.approx(math.pi / 2)

    def test_mouse_at_center_does_nothing(self, camera):
        """Test that a centered mouse does not turn the camera."""
        mouse_look(camera, WIDTH // 2, HEIGHT // 2, WIDTH, HEIGHT)

        assert to_sph(camera.direction).components == pytest.approx((1.0, 0.0, math.pi / 2))

    def test_mouse_look_is_quadratic(self, camera):
        """Test that a mouse at the right edge turns by about the sensitivity / 4."""
        mouse_look(camera, WIDTH, HEIGHT // 2, WIDTH, HEIGHT)

        assert camera.direction.azimuth == pytest.approx(math.pi / 2 + MOUSE_SENSITIVITY * 0.25)
