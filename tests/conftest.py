"""Shared fixtures for the painting core tests."""

import numpy as np
import pytest

from models import PathData, RasterImage
from playback import ArraySurface, ManualFrameClock


def _image_from_rgb(rgb) -> RasterImage:
    rgb = np.asarray(rgb, dtype=np.uint8)
    height, width, _ = rgb.shape
    alpha = np.full((height, width, 1), 255, dtype=np.uint8)
    return RasterImage(width=width, height=height, pixels=np.concatenate([rgb, alpha], axis=2))


@pytest.fixture
def image_from_rgb():
    """Factory building a RasterImage from an (h, w, 3) RGB array."""
    return _image_from_rgb


@pytest.fixture
def flat_image():
    """Factory building a single-color RasterImage."""

    def build(width, height, color=(255, 255, 255)):
        rgb = np.empty((height, width, 3), dtype=np.uint8)
        rgb[:] = color
        return _image_from_rgb(rgb)

    return build


@pytest.fixture
def split_image():
    """Factory building an image whose left half is black and right half white."""

    def build(width, height):
        rgb = np.zeros((height, width, 3), dtype=np.uint8)
        rgb[:, width // 2 :] = 255
        return _image_from_rgb(rgb)

    return build


@pytest.fixture
def noisy_image():
    """A deterministic random 24x18 image."""
    rng = np.random.default_rng(1234)
    return _image_from_rgb(rng.integers(0, 256, size=(18, 24, 3)))


@pytest.fixture
def make_path_data():
    """Factory building PathData with the given sequence lengths."""

    def build(outline_count, fill_count, width=10, height=10):
        return PathData(
            outline_points=np.zeros((outline_count, 2), dtype=np.int32),
            fill_points=np.zeros((fill_count, 2), dtype=np.int32),
            width=width,
            height=height,
        )

    return build


@pytest.fixture
def clock():
    return ManualFrameClock()


@pytest.fixture
def surface():
    return ArraySurface()
