"""Phase state machine for painting playback.

AIDEV-NOTE: Transitions are strictly IDLE -> OUTLINE -> COLORING -> COMPLETE,
and reset_state() returns to IDLE from anywhere. These functions only touch
PlaybackState, never a surface, so the invariants can be checked without
rendering anything.
"""

from dataclasses import dataclass

from models import OUTLINE_SHARE, PathData, Phase, PlaybackState

ACTIVE_PHASES = (Phase.OUTLINE, Phase.COLORING)


@dataclass(frozen=True)
class FrameBatch:
    """Slice of the active point sequence consumed by one tick."""

    phase: Phase
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def outline_progress(cursor: int, total: int, share: int = OUTLINE_SHARE) -> int:
    """Progress while outlining: floor(cursor / total * share)."""
    if total <= 0:
        return share
    return cursor * share // total


def coloring_progress(cursor: int, total: int, share: int = OUTLINE_SHARE) -> int:
    """Progress while coloring, from `share` up to exactly 100."""
    if total <= 0 or cursor >= total:
        return 100
    return share + cursor * (100 - share) // total


def is_active(state: PlaybackState) -> bool:
    """Whether the machine wants more ticks."""
    return state.phase in ACTIVE_PHASES and not state.paused


def begin(state: PlaybackState, path_data: "PathData | None") -> bool:
    """Move an idle machine into the outline phase.

    Returns:
        False, leaving the state untouched, when there is no PathData or the
        machine is not idle
    """
    if path_data is None or state.phase is not Phase.IDLE:
        return False
    state.phase = Phase.OUTLINE
    state.cursor = 0
    state.progress = 0
    state.paused = False
    return True


def advance(
    state: PlaybackState,
    path_data: PathData,
    share: int = OUTLINE_SHARE,
) -> "FrameBatch | None":
    """Consume up to `state.speed` points from the active sequence.

    Args:
        state: Playback state, mutated in place
        path_data: Sequences being played back
        share: Percent of total progress allotted to the outline phase

    Returns:
        The consumed slice, or None when paused, idle or complete
    """
    if not is_active(state):
        return None

    phase = state.phase
    points = path_data.outline_points if phase is Phase.OUTLINE else path_data.fill_points
    total = len(points)
    start = min(state.cursor, total)
    end = min(start + max(1, state.speed), total)
    state.cursor = end

    if phase is Phase.OUTLINE:
        state.progress = max(state.progress, outline_progress(end, total, share))
        if end >= total:
            state.phase = Phase.COLORING
            state.cursor = 0
    else:
        state.progress = max(state.progress, coloring_progress(end, total, share))
        if end >= total:
            state.phase = Phase.COMPLETE
            state.progress = 100

    return FrameBatch(phase=phase, start=start, end=end)


def reset_state(state: PlaybackState):
    """Return to IDLE from any phase. Speed is kept."""
    state.phase = Phase.IDLE
    state.cursor = 0
    state.progress = 0
    state.paused = False
