"""Canvas widget displaying the painting as it is drawn."""

from PyQt6 import QtWidgets
from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QImage, QPainter, QPen

from playback import ArraySurface
from ui.styles import COLORS, SIZES


class PaintingCanvas(QtWidgets.QWidget):
    """Custom widget rendering an ArraySurface scaled to fit."""

    def __init__(self, surface: "ArraySurface | None" = None, parent=None):
        super().__init__(parent)
        self.surface = surface or ArraySurface()
        self.show_placeholder = True
        self.placeholder_text = "Loading..."
        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)

    def set_placeholder(self, text: "str | None"):
        """Show a message instead of the painting, or clear it with None."""
        self.show_placeholder = text is not None
        self.placeholder_text = text or ""
        self.update()

    def _target_rect(self) -> QRectF:
        """
        Fit the surface into the widget.

        AIDEV-NOTE: Maintains aspect ratio, never upscales past 1:1 on small
        images, and centers inside the padding.
        """
        padding = SIZES.CANVAS_PADDING
        available_width = max(1, self.width() - 2 * padding)
        available_height = max(1, self.height() - 2 * padding)

        scale = min(
            available_width / self.surface.width,
            available_height / self.surface.height,
            1.0,
        )
        width = self.surface.width * scale
        height = self.surface.height * scale
        return QRectF(
            (self.width() - width) / 2, (self.height() - height) / 2, width, height
        )

    def to_qimage(self) -> QImage:
        """Copy the surface buffer into a QImage."""
        buffer = self.surface.buffer
        height, width, _ = buffer.shape
        image = QImage(
            buffer.tobytes(), width, height, 3 * width, QImage.Format.Format_RGB888
        )
        # Detach from the temporary bytes object
        return image.copy()

    def paintEvent(self, event):
        """Render the current surface contents."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), COLORS.BACKGROUND_DARK)

        if self.show_placeholder:
            painter.setPen(QPen(Qt.GlobalColor.lightGray))
            painter.drawText(
                self.rect(), Qt.AlignmentFlag.AlignCenter, self.placeholder_text
            )
            return

        target = self._target_rect()
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.drawImage(target, self.to_qimage())

        painter.setPen(QPen(COLORS.CANVAS_BORDER, 1))
        painter.drawRect(target)
