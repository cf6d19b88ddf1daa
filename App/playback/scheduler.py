"""Frame-driven playback of outline and fill point sequences."""

import logging
from typing import Any, Callable, Optional

from models import (
    BACKGROUND_COLOR,
    FILL_BLOCK_SIZE,
    OUTLINE_COLOR,
    OUTLINE_SHARE,
    PathData,
    Phase,
    PlaybackState,
)

from .clock import FrameClock
from .state import FrameBatch, advance, begin, is_active, reset_state
from .surface import ColorSource, Surface

logger = logging.getLogger(__name__)

ProgressSink = Callable[[Phase, int], None]


class PlaybackScheduler:
    """Consumes point sequences a tick at a time and paints them.

    One tick runs per frame callback, synchronously and to completion. At
    most one callback is pending at any time; its handle is kept so every
    state-mutating operation can revoke it first.
    """

    def __init__(
        self,
        clock: FrameClock,
        state: PlaybackState,
        outline_share: int = OUTLINE_SHARE,
        fill_block_size: int = FILL_BLOCK_SIZE,
        outline_color: "tuple[int, int, int]" = OUTLINE_COLOR,
        background_color: "tuple[int, int, int]" = BACKGROUND_COLOR,
        progress_sink: Optional[ProgressSink] = None,
    ):
        self.clock = clock
        self.state = state
        self.outline_share = outline_share
        self.fill_block_size = fill_block_size
        self.outline_color = outline_color
        self.background_color = background_color
        self.progress_sink = progress_sink

        self.path_data: Optional[PathData] = None
        self.surface: Optional[Surface] = None
        self.color_source: Optional[ColorSource] = None

        self._handle: Any = None

    @property
    def scheduled(self) -> bool:
        """Whether a frame callback is pending."""
        return self._handle is not None

    def bind(
        self,
        path_data: Optional[PathData],
        surface: Optional[Surface],
        color_source: Optional[ColorSource],
    ):
        """Point the scheduler at new artwork. Cancels any pending tick."""
        self.cancel()
        self.path_data = path_data
        self.surface = surface
        self.color_source = color_source

    # -------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------

    def start(self) -> bool:
        """Begin the outline phase from idle and start requesting ticks.

        Returns:
            False if there is nothing to play or the machine is not idle
        """
        self.cancel()
        if not begin(self.state, self.path_data):
            return False
        self._notify()
        self._schedule()
        return True

    def pause(self):
        """Freeze cursor advancement. Phase and cursor are untouched."""
        self.state.paused = True
        self.cancel()
        self._notify()

    def resume(self):
        self.state.paused = False
        if is_active(self.state):
            self._schedule()
        self._notify()

    def cancel(self):
        """Revoke the pending frame callback, if any."""
        if self._handle is not None:
            self.clock.cancel(self._handle)
            self._handle = None

    def reset(self):
        """Return to idle and clear the output surface, from any phase."""
        self.cancel()
        reset_state(self.state)
        if self.surface is not None:
            self.surface.fill(self.background_color)
        self._notify()

    # -------------------------------------------------------------
    # Ticks
    # -------------------------------------------------------------

    def _schedule(self):
        if self._handle is None:
            self._handle = self.clock.request_frame(self._on_frame)

    def _on_frame(self):
        self._handle = None
        self.tick()
        if is_active(self.state):
            self._schedule()

    def tick(self) -> Optional[FrameBatch]:
        """Run one scheduling step.

        Returns:
            The consumed batch, or None when paused, idle or complete
        """
        if self.path_data is None:
            return None

        batch = advance(self.state, self.path_data, self.outline_share)
        if batch is None:
            return None

        self._render(batch)
        if self.state.phase is Phase.COMPLETE:
            logger.info("Painting complete")
        self._notify()
        return batch

    def _render(self, batch: FrameBatch):
        surface = self.surface
        if surface is None or len(batch) == 0:
            return

        if batch.phase is Phase.OUTLINE:
            points = self.path_data.outline_points[batch.start : batch.end]
            color = self.outline_color
            for x, y in points.tolist():
                surface.set_pixel(x, y, color)
        else:
            points = self.path_data.fill_points[batch.start : batch.end]
            size = self.fill_block_size
            color_at = self.color_source.color_at
            for x, y in points.tolist():
                surface.fill_rect(x, y, size, size, color_at(x, y))

    def _notify(self):
        if self.progress_sink is not None:
            self.progress_sink(self.state.phase, self.state.progress)
