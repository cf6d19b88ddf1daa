"""Image analysis pipeline for the painting animator.

AIDEV-NOTE: Organized into modular components:
- processor: Main ImageAnalyzer orchestrator
- sampler: Luminance extraction
- edges: Sobel edge mask
- paths: Outline/fill point sequences
- utils: Loading, downscaling and gallery helpers
"""

from .edges import detect_edges
from .paths import plan_paths
from .processor import AnalysisResult, ImageAnalyzer
from .sampler import to_luminance
from .utils import (
    fit_to_max_size,
    list_gallery_images,
    load_image_file,
    pick_random_image,
)

__all__ = [
    "AnalysisResult",
    "ImageAnalyzer",
    "detect_edges",
    "fit_to_max_size",
    "list_gallery_images",
    "load_image_file",
    "pick_random_image",
    "plan_paths",
    "to_luminance",
]
