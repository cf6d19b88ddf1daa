"""Playback control panel: image source, pause/resume, reset, speed and progress."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)

from models import AnimatorConfig, Phase
from ui.styles import FONTS, SIZES, phase_stylesheet
from ui.widgets import WidgetFactory


class PlaybackPanel(QGroupBox):
    """Panel for driving a painting session."""

    # Signals for communication with main window
    new_painting_requested = pyqtSignal()
    open_image_requested = pyqtSignal()
    play_pause_requested = pyqtSignal()
    restart_requested = pyqtSignal()
    reset_requested = pyqtSignal()
    speed_changed = pyqtSignal(int)
    auto_start_toggled = pyqtSignal(bool)

    def __init__(self, config: AnimatorConfig, parent: "QWidget | None" = None):
        super().__init__("Painting", parent)
        self.config = config
        self._setup_ui()
        self._connect_signals()
        self.set_gallery_available(False)
        self.update_state(Phase.IDLE, 0, paused=False, has_artwork=False)

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        # --- Image source and playback buttons ---
        buttons_layout = QHBoxLayout()

        self.new_painting_btn = WidgetFactory.create_button(
            "🖌 New Painting",
            tooltip="Load a random image from the gallery",
            min_width=SIZES.BUTTON_MIN_WIDTH,
        )
        self.open_btn = WidgetFactory.create_button(
            "Open Image...", tooltip="Select an image file (PNG, JPG, etc.)"
        )
        self.play_pause_btn = WidgetFactory.create_button(
            "▶ Start", min_width=SIZES.BUTTON_MIN_WIDTH
        )
        self.restart_btn = WidgetFactory.create_button(
            "↻ Restart", tooltip="Replay the same painting from the start"
        )
        self.reset_btn = WidgetFactory.create_button(
            "Reset", tooltip="Clear the canvas and stop playback"
        )

        for button in (
            self.new_painting_btn,
            self.open_btn,
            self.play_pause_btn,
            self.restart_btn,
            self.reset_btn,
        ):
            buttons_layout.addWidget(button)
        buttons_layout.addStretch()
        layout.addLayout(buttons_layout)

        # --- Speed ---
        self.speed_slider, self.speed_label = WidgetFactory.create_slider_with_label(
            range_min=self.config.min_speed,
            range_max=self.config.max_speed,
            value=self.config.speed,
            label_width=SIZES.LABEL_MIN_WIDTH,
            label_format="{}x",
            tick_interval=50,
            tooltip="Points painted per frame",
        )
        speed_row = WidgetFactory.create_labeled_row("Speed:", self.speed_slider)
        speed_row.addWidget(self.speed_label)

        self.auto_start_checkbox = QCheckBox("Auto-start")
        self.auto_start_checkbox.setChecked(self.config.auto_start)
        self.auto_start_checkbox.setToolTip("Start painting as soon as an image is loaded")
        speed_row.addWidget(self.auto_start_checkbox)
        layout.addLayout(speed_row)

        # --- Progress ---
        progress_row = QHBoxLayout()
        self.phase_label = QLabel(Phase.IDLE.label)
        self.phase_label.setFont(FONTS.PHASE_LABEL)
        progress_row.addWidget(self.phase_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setFormat("%p%")
        progress_row.addWidget(self.progress_bar, stretch=1)
        layout.addLayout(progress_row)

        self.setLayout(layout)

    def _connect_signals(self):
        self.new_painting_btn.clicked.connect(self.new_painting_requested)
        self.open_btn.clicked.connect(self.open_image_requested)
        self.play_pause_btn.clicked.connect(self.play_pause_requested)
        self.restart_btn.clicked.connect(self.restart_requested)
        self.reset_btn.clicked.connect(self.reset_requested)
        self.speed_slider.valueChanged.connect(self.speed_changed)
        self.auto_start_checkbox.toggled.connect(self.auto_start_toggled)

    def set_gallery_available(self, available: bool):
        self._gallery_available = available
        self.new_painting_btn.setEnabled(available)

    def set_busy(self, busy: bool):
        """Disable image source buttons while an image is processed."""
        self.new_painting_btn.setEnabled(not busy and self._gallery_available)
        self.open_btn.setEnabled(not busy)

    def update_state(self, phase: Phase, progress: int, paused: bool, has_artwork: bool):
        """Reflect the session state in buttons, label and progress bar."""
        animating = phase in (Phase.OUTLINE, Phase.COLORING)

        if animating:
            self.play_pause_btn.setText("▶ Resume" if paused else "⏸ Pause")
        else:
            self.play_pause_btn.setText("▶ Start")
        self.play_pause_btn.setEnabled(has_artwork and phase is not Phase.COMPLETE)
        self.restart_btn.setVisible(phase is Phase.COMPLETE)
        self.reset_btn.setEnabled(has_artwork)

        label = phase.label
        if paused and animating:
            label = f"{label} (paused)"
        self.phase_label.setText(label)
        self.phase_label.setStyleSheet(phase_stylesheet(phase))
        self.progress_bar.setValue(progress)
        self.progress_bar.setVisible(phase is not Phase.IDLE)
