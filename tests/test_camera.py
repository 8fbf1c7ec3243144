import math

import numpy as np
import pytest

from metaphor.camera import Camera, OrthoCamera, PerspectiveCamera
from metaphor.transforms import look_at, ortho, perspective


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


def test_camera_view_sends_position_to_origin():
    camera = Camera((4.0, 5.0, 6.0))
    np.testing.assert_allclose(
        _apply(camera.view_matrix, camera.position), np.zeros(3), atol=1e-12
    )


def test_camera_view_follows_new_position():
    camera = Camera((0.0, 0.0, 0.0))
    camera.position = np.array([10.0, 0.0, 0.0])
    np.testing.assert_allclose(
        _apply(camera.view_matrix, (10.0, 0.0, 0.0)), np.zeros(3), atol=1e-12
    )


def test_camera_view_follows_new_front():
    camera = Camera((0.0, 0.0, 0.0))
    camera.front = np.array([1.0, 0.0, 0.0])
    ahead = _apply(camera.view_matrix, (3.0, 0.0, 0.0))
    np.testing.assert_allclose(ahead[:2], np.zeros(2), atol=1e-12)
    assert ahead[2] == pytest.approx(-3.0)


def test_ortho_camera_projection():
    camera = OrthoCamera((0.0, 2.0, 0.0))
    np.testing.assert_allclose(
        camera.projection, ortho(-400.0, 400.0, -400.0, 400.0, -0.1, 800.0)
    )


def test_ortho_camera_orientation():
    camera = OrthoCamera((0.0, 2.0, 0.0))
    np.testing.assert_allclose(camera.front, (0.0, 0.0, -1.0))
    np.testing.assert_allclose(camera.world_up, (0.0, 1.0, 0.0))
    np.testing.assert_allclose(camera.position, (0.0, 2.0, 0.0))


def test_perspective_camera_looks_along_positive_z():
    camera = PerspectiveCamera((0.0, 0.0, 0.0), 800.0, 800.0)
    np.testing.assert_allclose(camera.front, (0.0, 0.0, 1.0))
    np.testing.assert_allclose(
        camera.view_matrix, look_at((0, 0, 0), (0, 0, 1), (0, 1, 0))
    )


def test_perspective_camera_aspect_is_height_over_width():
    camera = PerspectiveCamera((0.0, 0.0, 0.0), 600.0, 800.0)
    assert camera.projection[1, 1] / camera.projection[0, 0] == pytest.approx(
        600.0 / 800.0
    )


def test_perspective_camera_projection_matches_source_settings():
    camera = PerspectiveCamera((1.0, 1.0, 1.0), 800.0, 800.0)
    np.testing.assert_allclose(
        camera.projection, perspective(math.radians(60.0), 1.0, 0.1, 1000.0)
    )