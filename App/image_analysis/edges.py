"""Sobel edge detection on a luminance buffer.

AIDEV-NOTE: The 1-pixel border is never computed and always stays 0, so
the mask can be sampled anywhere without bounds checks.
"""

import numpy as np

from models import EDGE_THRESHOLD

EDGE = 255
BACKGROUND = 0


def sobel_gradients(luminance: np.ndarray) -> "tuple[np.ndarray, np.ndarray]":
    """Compute horizontal and vertical Sobel gradients for interior pixels.

    Args:
        luminance: uint8 array of shape (height, width)

    Returns:
        Tuple of (gx, gy) float arrays of shape (height - 2, width - 2)
    """
    lum = luminance.astype(np.float64)
    height, width = lum.shape

    def shifted(dy: int, dx: int) -> np.ndarray:
        # Neighbor at offset (dx, dy) for every interior pixel
        return lum[1 + dy : height - 1 + dy, 1 + dx : width - 1 + dx]

    gx = (
        -shifted(-1, -1) + shifted(-1, 1)
        - 2 * shifted(0, -1) + 2 * shifted(0, 1)
        - shifted(1, -1) + shifted(1, 1)
    )
    gy = (
        -shifted(-1, -1) - 2 * shifted(-1, 0) - shifted(-1, 1)
        + shifted(1, -1) + 2 * shifted(1, 0) + shifted(1, 1)
    )
    return gx, gy


def detect_edges(
    luminance: np.ndarray, threshold: float = EDGE_THRESHOLD
) -> np.ndarray:
    """Build a binary edge mask by thresholding Sobel gradient magnitude.

    Args:
        luminance: uint8 array of shape (height, width)
        threshold: Magnitude a pixel must exceed to count as an edge

    Returns:
        uint8 array of the same shape with values in {0, 255}
    """
    height, width = luminance.shape
    edges = np.zeros((height, width), dtype=np.uint8)
    if height < 3 or width < 3:
        return edges

    gx, gy = sobel_gradients(luminance)
    magnitude = np.hypot(gx, gy)
    edges[1:-1, 1:-1] = np.where(magnitude > threshold, EDGE, BACKGROUND)
    return edges
