"""Main image analyzer orchestrating the complete pipeline.

AIDEV-NOTE: raw image -> working resolution -> luminance -> edge mask ->
point sequences. Pure computation: nothing here touches a surface or the
playback state, so a failed or abandoned run leaves no trace.
"""

import logging
from dataclasses import dataclass

import numpy as np

from models import AnimatorConfig, PathData, RasterImage

from .edges import detect_edges
from .paths import plan_paths
from .sampler import to_luminance
from .utils import fit_to_max_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Result of the image analysis pipeline."""

    # Image at working resolution, also the color source for playback
    image: RasterImage

    luminance: np.ndarray
    edges: np.ndarray
    path_data: PathData

    # Original image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    @property
    def downscaled(self) -> bool:
        return (self.image.width, self.image.height) != (
            self.original_width,
            self.original_height,
        )


class ImageAnalyzer:
    """Turns decoded images into playback point sequences."""

    def __init__(self, config: "AnimatorConfig | None" = None):
        self.config = (config or AnimatorConfig()).clamped()

    def analyze(self, image: RasterImage) -> AnalysisResult:
        """Execute the complete analysis pipeline.

        Args:
            image: Decoded source image at any resolution

        Returns:
            AnalysisResult with all intermediate buffers and the PathData
        """
        config = self.config
        logger.debug(f"Analyzing {image.width}x{image.height} image")

        working = fit_to_max_size(image, config.max_size, config.resample)
        luminance = to_luminance(working)
        edges = detect_edges(luminance, config.edge_threshold)
        path_data = plan_paths(edges, config.outline_stride, config.binarize_cutoff)

        logger.info(
            f"Planned {path_data.outline_count} outline points and "
            f"{path_data.fill_count} fill points at {working.width}x{working.height}"
        )

        return AnalysisResult(
            image=working,
            luminance=luminance,
            edges=edges,
            path_data=path_data,
            original_width=image.width,
            original_height=image.height,
        )
