"""Exception types raised by the painting core."""


class ArtRevealError(Exception):
    """Base class for painting core errors."""


class ImageDecodeError(ArtRevealError, ValueError):
    """The image source could not produce pixel data.

    AIDEV-NOTE: The core takes no corrective action. Retry or fallback is
    up to whoever supplied the image.
    """


class SurfaceUnavailableError(ArtRevealError):
    """The display surface was not ready when processing was requested."""
