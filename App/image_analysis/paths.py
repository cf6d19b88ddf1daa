"""Point-sequence planning for outline and fill playback.

AIDEV-NOTE: Both sequences are row-major (top-to-bottom, left-to-right).
That ordering is what makes the outline look sketched in a sweep, so keep
it. Points are plain coordinates, not connected strokes.
"""

import numpy as np

from models import BINARIZE_CUTOFF, OUTLINE_STRIDE, PathData


def outline_points(
    edges: np.ndarray,
    stride: int = OUTLINE_STRIDE,
    cutoff: int = BINARIZE_CUTOFF,
) -> np.ndarray:
    """Sample edge pixels on a coarse grid.

    Args:
        edges: Edge mask of shape (height, width)
        stride: Grid spacing in both axes
        cutoff: Mask value a pixel must exceed to be included

    Returns:
        int32 array of (x, y) rows in row-major scan order
    """
    grid = edges[::stride, ::stride]
    # np.nonzero walks the grid in row-major order
    rows, cols = np.nonzero(grid > cutoff)
    return np.column_stack((cols * stride, rows * stride)).astype(np.int32)


def fill_points(width: int, height: int) -> np.ndarray:
    """Enumerate every pixel in row-major order as (x, y) rows."""
    ys, xs = np.mgrid[0:height, 0:width]
    return np.column_stack((xs.ravel(), ys.ravel())).astype(np.int32)


def plan_paths(
    edges: np.ndarray,
    stride: int = OUTLINE_STRIDE,
    cutoff: int = BINARIZE_CUTOFF,
) -> PathData:
    """Build the outline and fill sequences for one image.

    Args:
        edges: Edge mask at working resolution
        stride: Outline sampling grid spacing
        cutoff: Binarization cutoff for the mask

    Returns:
        PathData sized to the mask
    """
    height, width = edges.shape
    return PathData(
        outline_points=outline_points(edges, stride, cutoff),
        fill_points=fill_points(width, height),
        width=width,
        height=height,
    )
