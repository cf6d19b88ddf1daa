"""Luminance extraction from RGBA pixel data."""

import numpy as np

from models import RasterImage

# Standard luma weighting (ITU-R BT.601)
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def to_luminance(image: RasterImage) -> np.ndarray:
    """Convert an image to a single-channel luminance buffer.

    Args:
        image: Decoded image (alpha is ignored)

    Returns:
        uint8 array of shape (height, width), each value
        round(0.299*R + 0.587*G + 0.114*B)
    """
    luma = image.rgb.astype(np.float64) @ LUMA_WEIGHTS
    # Round half up; a flat white pixel sums to 254.99999...
    luminance = np.clip(np.floor(luma + 0.5), 0, 255).astype(np.uint8)
    luminance.setflags(write=False)
    return luminance
