"""Data models and constants for the ArtReveal painting animator."""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

import numpy as np
from PIL import Image

# AIDEV-NOTE: Two variants of the animator shipped with different splits and
# pacing. Neither is canonical, so both are kept as named constants.
MAX_IMAGE_SIZE = 1000  # px, larger dimension of the working image
EDGE_THRESHOLD = 50.0  # gradient magnitude cutoff
OUTLINE_STRIDE = 3  # px between sampled outline points
BINARIZE_CUTOFF = 128  # mask value above which a pixel is an edge
OUTLINE_SHARE = 40  # % of total progress allotted to outlining
ALT_OUTLINE_SHARE = 50
DEFAULT_SPEED = 100  # points per frame
MIN_SPEED = 10
MAX_SPEED = 500
FILL_BLOCK_SIZE = 3  # px, side of the block painted per fill point
FRAME_INTERVAL_MS = 16  # ~60 FPS

BACKGROUND_COLOR = (255, 255, 255)
OUTLINE_COLOR = (0, 0, 0)

RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}

# Configuration file path
CONFIG_FILE = Path.home() / ".artreveal_config.json"


def clamp(value, low, high):
    """Force value into [low, high]."""
    return max(low, min(value, high))


class Phase(Enum):
    """Painting playback phases, in the order they are visited."""

    IDLE = "idle"
    OUTLINE = "outline"
    COLORING = "coloring"
    COMPLETE = "complete"

    @property
    def label(self) -> str:
        """Get display label for phase."""
        labels = {
            Phase.IDLE: "Ready",
            Phase.OUTLINE: "Drawing Outlines...",
            Phase.COLORING: "Adding Colors...",
            Phase.COMPLETE: "Complete!",
        }
        return labels[self]


@dataclass(frozen=True, eq=False)
class RasterImage:
    """A decoded image handed to the core.

    AIDEV-NOTE: Pixels are RGBA, row-major, shape (height, width, 4). The
    buffer is made read-only on construction; the core never mutates it.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be non-empty, got {self.width}x{self.height}"
            )
        if self.pixels.shape != (self.height, self.width, 4):
            raise ValueError(
                f"Pixel buffer shape {self.pixels.shape} does not match "
                f"{self.width}x{self.height} RGBA"
            )
        pixels = np.ascontiguousarray(self.pixels, dtype=np.uint8)
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        """Build a RasterImage from any Pillow image (converted to RGBA)."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return cls(width=width, height=height, pixels=np.array(image, dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        """Return the pixels as a Pillow RGBA image."""
        return Image.fromarray(np.array(self.pixels))

    @property
    def rgb(self) -> np.ndarray:
        """RGB channels only, shape (height, width, 3)."""
        return self.pixels[:, :, :3]


@dataclass(frozen=True, eq=False)
class PathData:
    """Outline and fill point sequences for one processed image.

    Points are (x, y) rows of an int32 array of shape (N, 2), in playback
    order. Built once per image and only ever read by index afterwards.
    """

    outline_points: np.ndarray
    fill_points: np.ndarray
    width: int
    height: int

    def __post_init__(self):
        for name in ("outline_points", "fill_points"):
            points = np.asarray(getattr(self, name), dtype=np.int32).reshape(-1, 2)
            points.setflags(write=False)
            object.__setattr__(self, name, points)

    @property
    def outline_count(self) -> int:
        return len(self.outline_points)

    @property
    def fill_count(self) -> int:
        return len(self.fill_points)


@dataclass
class PlaybackState:
    """Mutable playback state, one per painting session."""

    phase: Phase = Phase.IDLE
    cursor: int = 0  # index into the active point sequence
    progress: int = 0  # 0-100
    speed: int = DEFAULT_SPEED  # points per frame
    paused: bool = False


@dataclass
class AnimatorConfig:
    """Tuning knobs for analysis and playback."""

    # Image analysis
    max_size: int = MAX_IMAGE_SIZE
    resample: str = "lanczos"  # key of RESAMPLE_FILTERS
    edge_threshold: float = EDGE_THRESHOLD
    outline_stride: int = OUTLINE_STRIDE
    binarize_cutoff: int = BINARIZE_CUTOFF

    # Playback
    outline_share: int = OUTLINE_SHARE
    speed: int = DEFAULT_SPEED
    min_speed: int = MIN_SPEED
    max_speed: int = MAX_SPEED
    fill_block_size: int = FILL_BLOCK_SIZE
    frame_interval_ms: int = FRAME_INTERVAL_MS
    auto_start: bool = False

    # Image source
    gallery_dir: "str | None" = None
    retry_delay_ms: int = 2000

    # Colors are not persisted
    background_color: "tuple[int, int, int]" = field(default=BACKGROUND_COLOR)
    outline_color: "tuple[int, int, int]" = field(default=OUTLINE_COLOR)

    def clamp_speed(self, speed: int) -> int:
        """Clamp a requested points-per-frame value into the accepted range."""
        return int(clamp(int(speed), self.min_speed, self.max_speed))

    def clamped(self) -> "AnimatorConfig":
        """Return a copy with every value forced into its accepted range.

        AIDEV-NOTE: Configuration errors never halt playback, so bad values
        are clamped instead of rejected.
        """
        min_speed = int(clamp(int(self.min_speed), 1, MAX_SPEED * 100))
        max_speed = max(min_speed, int(self.max_speed))
        return replace(
            self,
            max_size=max(1, int(self.max_size)),
            resample=self.resample if self.resample in RESAMPLE_FILTERS else "lanczos",
            edge_threshold=max(0.0, float(self.edge_threshold)),
            outline_stride=max(1, int(self.outline_stride)),
            binarize_cutoff=int(clamp(int(self.binarize_cutoff), 0, 254)),
            outline_share=int(clamp(int(self.outline_share), 0, 100)),
            min_speed=min_speed,
            max_speed=max_speed,
            speed=int(clamp(int(self.speed), min_speed, max_speed)),
            fill_block_size=max(1, int(self.fill_block_size)),
            frame_interval_ms=max(1, int(self.frame_interval_ms)),
            retry_delay_ms=max(0, int(self.retry_delay_ms)),
        )
