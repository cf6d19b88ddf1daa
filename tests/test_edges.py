"""Tests for the Sobel edge detector."""

import numpy as np

from image_analysis import detect_edges, to_luminance


def _assert_border_is_background(edges):
    assert (edges[0, :] == 0).all()
    assert (edges[-1, :] == 0).all()
    assert (edges[:, 0] == 0).all()
    assert (edges[:, -1] == 0).all()


def test_flat_image_has_no_edges(flat_image):
    edges = detect_edges(to_luminance(flat_image(4, 4)))
    assert edges.shape == (4, 4)
    assert (edges == 0).all()


def test_mask_is_binary_with_empty_border(noisy_image):
    edges = detect_edges(to_luminance(noisy_image))
    assert edges.shape == (noisy_image.height, noisy_image.width)
    assert set(np.unique(edges)) <= {0, 255}
    assert (edges == 255).any()
    _assert_border_is_background(edges)


def test_vertical_step_marks_both_sides():
    """A hard vertical step lights up the two columns touching it."""
    luminance = np.zeros((5, 6), dtype=np.uint8)
    luminance[:, 3:] = 255

    edges = detect_edges(luminance)

    assert (edges[1:-1, 2] == 255).all()
    assert (edges[1:-1, 3] == 255).all()
    assert (edges[:, 1] == 0).all()
    assert (edges[:, 4] == 0).all()
    _assert_border_is_background(edges)


def test_horizontal_step_uses_vertical_gradient():
    luminance = np.zeros((6, 5), dtype=np.uint8)
    luminance[3:, :] = 255

    edges = detect_edges(luminance)

    assert (edges[2, 1:-1] == 255).all()
    assert (edges[3, 1:-1] == 255).all()
    assert (edges[1, :] == 0).all()
    assert (edges[4, :] == 0).all()


def test_threshold_is_strict_and_configurable():
    """A step of 10 gives |gx| = 40: below 50, above 30, not above 40."""
    luminance = np.full((5, 5), 100, dtype=np.uint8)
    luminance[:, 3:] = 110

    assert (detect_edges(luminance) == 0).all()
    assert (detect_edges(luminance, threshold=30)[1:-1, 2] == 255).all()
    assert (detect_edges(luminance, threshold=40) == 0).all()


def test_tiny_images_have_no_interior():
    for shape in ((1, 1), (2, 5), (5, 2)):
        edges = detect_edges(np.full(shape, 255, dtype=np.uint8))
        assert edges.shape == shape
        assert (edges == 0).all()


def test_uint8_luminance_does_not_wrap():
    """Gradients are computed in floating point, not uint8 arithmetic."""
    luminance = np.zeros((3, 3), dtype=np.uint8)
    luminance[:, 0] = 255
    edges = detect_edges(luminance)
    assert edges[1, 1] == 255
