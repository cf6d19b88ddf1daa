"""Utility functions for loading, resizing and picking source images.

AIDEV-NOTE: Everything here sits at the edge of the pipeline. Decoding
belongs to the image source; downscaling fixes the working resolution that
every downstream structure uses.
"""

import logging
import random
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from errors import ImageDecodeError
from models import RESAMPLE_FILTERS, RasterImage

logger = logging.getLogger(__name__)

GALLERY_EXTENSIONS = (".png", ".jpg", ".jpeg", ".jfif", ".bmp", ".gif", ".webp")


def load_image_file(file_path: "str | Path") -> RasterImage:
    """Load and decode an image file.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        RasterImage in RGBA

    Raises:
        ImageDecodeError: If the file cannot be read or decoded
    """
    try:
        with Image.open(file_path) as image:
            # AIDEV-NOTE: Always convert to RGBA for consistent processing
            image.load()
            raster = RasterImage.from_pil(image)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise ImageDecodeError(f"Failed to load image {file_path}: {e}") from e

    logger.info(f"Loaded {file_path} ({raster.width}x{raster.height})")
    return raster


def working_size(width: int, height: int, max_size: int) -> "tuple[int, int]":
    """Compute the working resolution for an image.

    Args:
        width: Original width in pixels
        height: Original height in pixels
        max_size: Bound for the larger dimension

    Returns:
        (width, height) unchanged if both fit, otherwise uniformly scaled so
        the larger dimension equals max_size (other side rounded, at least 1)
    """
    if width <= max_size and height <= max_size:
        return width, height

    if width >= height:
        return max_size, max(1, round(height * max_size / width))
    return max(1, round(width * max_size / height)), max_size


def fit_to_max_size(
    image: RasterImage, max_size: int, resample: str = "lanczos"
) -> RasterImage:
    """Downscale an image so neither dimension exceeds max_size.

    Args:
        image: Decoded source image
        max_size: Bound for the larger dimension
        resample: Key of RESAMPLE_FILTERS

    Returns:
        The same image if it already fits, otherwise a resized copy
    """
    new_width, new_height = working_size(image.width, image.height, max_size)
    if (new_width, new_height) == (image.width, image.height):
        return image

    resample_filter = RESAMPLE_FILTERS.get(resample, Image.Resampling.LANCZOS)
    resized = image.to_pil().resize((new_width, new_height), resample_filter)
    logger.info(
        f"Downscaled {image.width}x{image.height} to {new_width}x{new_height}"
    )
    return RasterImage.from_pil(resized)


def list_gallery_images(gallery_dir: "str | Path") -> "list[Path]":
    """List image files in a preset gallery directory, sorted by name."""
    directory = Path(gallery_dir)
    if not directory.is_dir():
        logger.warning(f"Gallery directory not found: {directory}")
        return []
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in GALLERY_EXTENSIONS
    )


def pick_random_image(
    paths: "list[Path]",
    rng: "random.Random | None" = None,
    exclude: "Path | None" = None,
) -> "Path | None":
    """Pick a random gallery image, avoiding `exclude` when possible."""
    if not paths:
        return None
    rng = rng or random.Random()
    candidates = [p for p in paths if p != exclude] or list(paths)
    return rng.choice(candidates)
