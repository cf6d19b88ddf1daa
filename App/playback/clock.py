"""Frame clocks that drive the playback scheduler one tick at a time."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class FrameClock(ABC):
    """Callback-based timer firing roughly at display refresh rate.

    Each request_frame() call schedules exactly one callback. The returned
    handle can be passed to cancel() to revoke it before it fires.
    """

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> Any: ...

    @abstractmethod
    def cancel(self, handle: Any): ...


class ManualFrameClock(FrameClock):
    """Frame clock advanced explicitly, for headless rendering and tests."""

    def __init__(self):
        self._pending: "dict[int, Callable[[], None]]" = {}
        self._next_handle = 0
        self.frames = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: Callable[[], None]) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle: int):
        self._pending.pop(handle, None)

    def advance(self, frames: int = 1) -> int:
        """Fire the callbacks pending at the start of each frame.

        Callbacks requested while a frame runs fire on the next one.

        Returns:
            Number of callbacks fired
        """
        fired = 0
        for _ in range(frames):
            due = list(self._pending)
            self.frames += 1
            for handle in due:
                # A callback earlier in this frame may have cancelled it
                callback = self._pending.pop(handle, None)
                if callback is None:
                    continue
                callback()
                fired += 1
        return fired

    def run_until_idle(self, max_frames: int = 1_000_000) -> int:
        """Advance until nothing is pending. Returns frames elapsed."""
        elapsed = 0
        while self._pending and elapsed < max_frames:
            self.advance()
            elapsed += 1
        return elapsed
