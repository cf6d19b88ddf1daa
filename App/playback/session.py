"""Painting session controller.

AIDEV-NOTE: A session owns exactly one PlaybackState and at most one
PathData. Every operation that mutates shared state cancels the pending
frame callback first, so a stale tick can never paint onto a surface that
has just been resized or cleared.
"""

import logging
from typing import Optional

from errors import SurfaceUnavailableError
from image_analysis import AnalysisResult, ImageAnalyzer
from models import AnimatorConfig, PathData, Phase, PlaybackState, RasterImage

from .clock import FrameClock
from .scheduler import PlaybackScheduler, ProgressSink
from .surface import ColorSource, Surface

logger = logging.getLogger(__name__)


class PaintingSession:
    """Drives analysis and playback in response to external events."""

    def __init__(
        self,
        clock: FrameClock,
        surface: Optional[Surface] = None,
        config: Optional[AnimatorConfig] = None,
        progress_sink: Optional[ProgressSink] = None,
    ):
        self.config = (config or AnimatorConfig()).clamped()
        self.surface = surface
        self.analyzer = ImageAnalyzer(self.config)
        self.state = PlaybackState(speed=self.config.speed)
        self.analysis: Optional[AnalysisResult] = None

        self.scheduler = PlaybackScheduler(
            clock,
            self.state,
            outline_share=self.config.outline_share,
            fill_block_size=self.config.fill_block_size,
            outline_color=self.config.outline_color,
            background_color=self.config.background_color,
            progress_sink=progress_sink,
        )

    @property
    def path_data(self) -> Optional[PathData]:
        return self.scheduler.path_data

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def progress(self) -> int:
        return self.state.progress

    @property
    def animating(self) -> bool:
        return self.state.phase in (Phase.OUTLINE, Phase.COLORING)

    def attach_surface(self, surface: Surface):
        """Use a new output surface. Cancels playback and returns to idle."""
        self.scheduler.cancel()
        self.surface = surface
        self.scheduler.bind(self.path_data, surface, self.scheduler.color_source)
        if self.path_data is not None:
            surface.resize(self.path_data.width, self.path_data.height)
        self.scheduler.reset()

    # -------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------

    def load_image(self, image: RasterImage) -> AnalysisResult:
        """Analyze a new image and prepare it for playback.

        Args:
            image: Successfully decoded image at any resolution

        Returns:
            The analysis result, whose PathData is now the session's

        Raises:
            SurfaceUnavailableError: If no ready surface is attached. The
                previous session state is left untouched.
        """
        surface = self.surface
        if surface is None or not surface.ready:
            raise SurfaceUnavailableError("Output surface is not ready")

        # Analysis is pure; nothing is mutated until it succeeds
        result = self.analyzer.analyze(image)
        path_data = result.path_data

        self.scheduler.cancel()
        self.analysis = result
        surface.resize(path_data.width, path_data.height)
        self.scheduler.bind(path_data, surface, ColorSource(result.image))
        self.scheduler.reset()
        logger.info(f"Session loaded {path_data.width}x{path_data.height} artwork")

        if self.config.auto_start:
            self.start()
        return result

    def start(self) -> bool:
        """Play the current artwork from the beginning.

        A missing PathData is a silent no-op. Starting from any phase other
        than idle resets first, so the surface is blank when outlining begins.

        Returns:
            True if playback started
        """
        if self.path_data is None:
            logger.debug("start() ignored: no image loaded")
            return False
        if self.state.phase is not Phase.IDLE:
            self.scheduler.reset()
        started = self.scheduler.start()
        if started:
            logger.info(
                f"Playback started ({self.path_data.outline_count} outline points, "
                f"speed {self.state.speed})"
            )
        return started

    def pause(self):
        if not self.state.paused:
            self.scheduler.pause()
            logger.info("Playback paused")

    def resume(self):
        if self.state.paused:
            self.scheduler.resume()
            logger.info("Playback resumed")

    def toggle_pause(self) -> bool:
        """Flip the paused flag. Returns the new value."""
        if self.state.paused:
            self.resume()
        else:
            self.pause()
        return self.state.paused

    def reset(self):
        """Return to idle with a blank surface, keeping the PathData."""
        self.scheduler.reset()
        logger.info("Session reset")

    def set_speed(self, speed: int) -> int:
        """Set points per tick, clamped into the accepted range.

        Takes effect on the next tick without restarting the phase.

        Returns:
            The effective speed
        """
        self.state.speed = self.config.clamp_speed(speed)
        return self.state.speed
