"""Qt implementation of the playback frame clock."""

from typing import Callable

from PyQt6.QtCore import QObject, QTimer

from models import FRAME_INTERVAL_MS
from playback import FrameClock


class QtFrameClock(FrameClock):
    """Frame clock backed by one single-shot QTimer per requested frame.

    AIDEV-NOTE: Callbacks run on the GUI thread, so ticks never overlap.
    Cancelling stops the timer before it fires.
    """

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS, parent: "QObject | None" = None):
        self.interval_ms = interval_ms
        self.parent = parent

    def request_frame(self, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        timer.setInterval(self.interval_ms)
        timer.timeout.connect(callback)
        timer.timeout.connect(timer.deleteLater)
        timer.start()
        return timer

    def cancel(self, handle: QTimer):
        handle.stop()
        handle.deleteLater()
