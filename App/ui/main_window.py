"""Main application window for the painting animator."""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QLabel,
    QMainWindow,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from config_manager import ConfigManager
from errors import ImageDecodeError, SurfaceUnavailableError
from image_analysis import list_gallery_images, load_image_file, pick_random_image
from models import AnimatorConfig, Phase
from playback import PaintingSession
from ui.canvas import PaintingCanvas
from ui.frame_clock import QtFrameClock
from ui.playback_panel import PlaybackPanel
from ui.styles import FONTS, SIZES

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.jfif *.bmp *.gif *.webp);;All Files (*)"


class PaintingWindow(QMainWindow):
    """Main application window: one canvas, one painting session."""

    # Bridges the core's progress sink into Qt
    progress_changed = pyqtSignal(object, int)  # Phase, progress

    def __init__(
        self,
        config: Optional[AnimatorConfig] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        super().__init__()
        self.setWindowTitle("ArtReveal: Live Drawing & Painting")
        self.setMinimumSize(*SIZES.WINDOW_MIN_SIZE)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.config = (config or self.config_manager.load()).clamped()
        self.gallery: "list[Path]" = []
        self.current_path: Optional[Path] = None

        # UI component references (created in _setup_ui)
        self.canvas: PaintingCanvas
        self.playback_panel: PlaybackPanel

        # AIDEV-NOTE: The session is created without a surface; the canvas
        # attaches one once it exists. Loading before that raises
        # SurfaceUnavailableError.
        self.session = PaintingSession(
            QtFrameClock(self.config.frame_interval_ms, parent=self),
            config=self.config,
            progress_sink=self.progress_changed.emit,
        )

        self._setup_ui()
        self._connect_signals()
        self.session.attach_surface(self.canvas.surface)
        self.refresh_gallery()
        if not self.gallery:
            self.canvas.set_placeholder("Open an image to begin")

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_toolbar()

        central = QWidget()
        layout = QVBoxLayout()

        title = QLabel("ArtReveal: Live Drawing & Painting")
        title.setFont(FONTS.TITLE)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Upload any image. Watch it be sketched and painted.")
        subtitle.setFont(FONTS.SUBTITLE)
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)

        self.playback_panel = PlaybackPanel(self.config)
        layout.addWidget(self.playback_panel)

        self.canvas = PaintingCanvas()
        layout.addWidget(self.canvas, stretch=1)

        central.setLayout(layout)
        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _create_toolbar(self):
        """Create the main toolbar with file actions."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        open_action = QAction("Open Image...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._open_image_dialog)
        toolbar.addAction(open_action)

        gallery_action = QAction("Choose Gallery...", self)
        gallery_action.setToolTip("Select a folder of preset images")
        gallery_action.triggered.connect(self._choose_gallery_dialog)
        toolbar.addAction(gallery_action)

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.progress_changed.connect(self._on_progress)

        panel = self.playback_panel
        panel.new_painting_requested.connect(self.new_painting)
        panel.open_image_requested.connect(self._open_image_dialog)
        panel.play_pause_requested.connect(self._on_play_pause)
        panel.restart_requested.connect(self.session.start)
        panel.reset_requested.connect(self.session.reset)
        panel.speed_changed.connect(self._on_speed_changed)
        panel.auto_start_toggled.connect(self._on_auto_start_toggled)

    # === Image Sources ===

    def refresh_gallery(self):
        """Re-scan the configured gallery directory."""
        if self.config.gallery_dir:
            self.gallery = list_gallery_images(self.config.gallery_dir)
        else:
            self.gallery = []
        self.playback_panel.set_gallery_available(bool(self.gallery))

    def new_painting(self):
        """Reset and load a random gallery image."""
        path = pick_random_image(self.gallery, exclude=self.current_path)
        if path is None:
            self.statusBar().showMessage("No gallery images available")
            return
        self.session.reset()
        self.open_path(path, from_gallery=True)

    def open_path(self, path: "str | Path", from_gallery: bool = False) -> bool:
        """Decode an image file and hand it to the session.

        Args:
            path: Image file to load
            from_gallery: Retry with another gallery image on decode failure

        Returns:
            True if the image was loaded
        """
        path = Path(path)
        self.playback_panel.set_busy(True)
        self.canvas.set_placeholder("Processing image...")
        self.statusBar().showMessage(f"Processing {path.name}...")
        QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)

        try:
            image = load_image_file(path)
            result = self.session.load_image(image)
        except ImageDecodeError as e:
            logger.error(str(e))
            self._on_load_failed(f"Failed to load image: {path.name}", from_gallery)
            return False
        except SurfaceUnavailableError as e:
            logger.error(str(e))
            self._on_load_failed("Canvas is not ready, try again", from_gallery=False)
            return False
        finally:
            QApplication.restoreOverrideCursor()
            self.playback_panel.set_busy(False)

        self.current_path = path
        self.canvas.set_placeholder(None)
        path_data = result.path_data
        self.statusBar().showMessage(
            f"{path.name}: {path_data.width}x{path_data.height}, "
            f"{path_data.outline_count} outline points"
        )
        self._refresh_panel()
        return True

    def _on_load_failed(self, message: str, from_gallery: bool):
        self.statusBar().showMessage(message)
        if self.session.path_data is None:
            self.canvas.set_placeholder(message)
        else:
            self.canvas.set_placeholder(None)

        # AIDEV-NOTE: Retry policy lives here, not in the core
        if from_gallery and self.gallery:
            QTimer.singleShot(self.config.retry_delay_ms, self.new_painting)

    def _open_image_dialog(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Image", "", IMAGE_FILTER
        )
        if file_path:
            self.open_path(file_path)

    def _choose_gallery_dialog(self):
        directory = QFileDialog.getExistingDirectory(self, "Choose Gallery Folder")
        if not directory:
            return
        self.config.gallery_dir = directory
        self.refresh_gallery()
        self.statusBar().showMessage(f"{len(self.gallery)} gallery images found")

    # === Playback ===

    def _on_play_pause(self):
        if self.session.animating:
            self.session.toggle_pause()
        else:
            self.session.start()

    def _on_speed_changed(self, value: int):
        self.config.speed = self.session.set_speed(value)

    def _on_auto_start_toggled(self, checked: bool):
        self.config.auto_start = checked
        self.session.config.auto_start = checked

    def _on_progress(self, phase: Phase, progress: int):
        """Handle phase/progress updates from the session."""
        self._refresh_panel(phase, progress)
        self.canvas.update()

    def _refresh_panel(self, phase: Optional[Phase] = None, progress: Optional[int] = None):
        state = self.session.state
        self.playback_panel.update_state(
            phase if phase is not None else state.phase,
            progress if progress is not None else state.progress,
            paused=state.paused,
            has_artwork=self.session.path_data is not None,
        )

    # === Application Lifecycle ===

    def closeEvent(self, a0):
        """Stop playback and persist settings when window closes."""
        self.session.scheduler.cancel()
        success, error = self.config_manager.save(self.config)
        if not success:
            logger.warning(f"Could not save configuration: {error}")
        if a0:
            a0.accept()
