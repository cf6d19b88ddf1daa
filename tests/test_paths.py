"""Tests for outline and fill point planning."""

import numpy as np
import pytest

from image_analysis import ImageAnalyzer, detect_edges, plan_paths, to_luminance
from models import AnimatorConfig


def test_flat_white_scenario(flat_image):
    """4x4 white: no outline, 16 fill points in row-major order."""
    image = flat_image(4, 4)
    edges = detect_edges(to_luminance(image))

    path_data = plan_paths(edges)

    assert path_data.outline_points.tolist() == []
    assert path_data.fill_points.tolist() == [[x, y] for y in range(4) for x in range(4)]
    assert (path_data.width, path_data.height) == (4, 4)


def test_outline_is_row_major_on_stride_grid():
    edges = np.full((6, 7), 255, dtype=np.uint8)

    path_data = plan_paths(edges, stride=3)

    assert path_data.outline_points.tolist() == [
        [0, 0], [3, 0], [6, 0],
        [0, 3], [3, 3], [6, 3],
    ]


def test_outline_skips_off_grid_edges():
    edges = np.zeros((9, 9), dtype=np.uint8)
    edges[4, :] = 255  # row 4 is not on the stride-3 grid
    edges[:, 6] = 255

    points = plan_paths(edges).outline_points.tolist()

    assert points == [[6, 0], [6, 3], [6, 6]]


def test_binarize_cutoff_is_strict():
    edges = np.zeros((4, 4), dtype=np.uint8)
    edges[0, 0] = 128
    edges[0, 3] = 129

    assert plan_paths(edges, cutoff=128).outline_points.tolist() == [[3, 0]]


def test_fill_covers_every_pixel(noisy_image):
    path_data = ImageAnalyzer().analyze(noisy_image).path_data
    assert path_data.fill_count == noisy_image.width * noisy_image.height
    assert path_data.fill_points[0].tolist() == [0, 0]
    assert path_data.fill_points[-1].tolist() == [noisy_image.width - 1, noisy_image.height - 1]


def test_outline_bounded_by_grid(noisy_image):
    path_data = ImageAnalyzer().analyze(noisy_image).path_data
    assert 0 < path_data.outline_count <= path_data.fill_count / 9


def test_points_are_in_bounds(noisy_image):
    path_data = ImageAnalyzer().analyze(noisy_image).path_data
    for points in (path_data.outline_points, path_data.fill_points):
        assert (points[:, 0] >= 0).all() and (points[:, 0] < path_data.width).all()
        assert (points[:, 1] >= 0).all() and (points[:, 1] < path_data.height).all()


def test_path_data_is_immutable(noisy_image):
    path_data = ImageAnalyzer().analyze(noisy_image).path_data
    with pytest.raises(ValueError):
        path_data.fill_points[0, 0] = 5


def test_analyzer_uses_working_resolution(split_image):
    analyzer = ImageAnalyzer(AnimatorConfig(max_size=12))

    result = analyzer.analyze(split_image(48, 24))

    assert result.downscaled
    assert (result.original_width, result.original_height) == (48, 24)
    assert (result.image.width, result.image.height) == (12, 6)
    assert (result.path_data.width, result.path_data.height) == (12, 6)
    assert result.luminance.shape == (6, 12)
    assert result.edges.shape == (6, 12)
    assert result.path_data.fill_count == 72


def test_analyzer_finds_split_edge(split_image):
    path_data = ImageAnalyzer().analyze(split_image(12, 12)).path_data
    xs = {x for x, _ in path_data.outline_points.tolist()}
    assert xs == {6}
