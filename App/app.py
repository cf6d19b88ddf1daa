"""ArtReveal painting animator - Main entry point."""

import argparse
import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from config_manager import ConfigManager
from models import CONFIG_FILE


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Watch an image be sketched and painted."
    )
    parser.add_argument("image", nargs="?", help="Image file to paint")
    parser.add_argument("--gallery", help="Folder of preset images for 'New Painting'")
    parser.add_argument("--speed", type=int, help="Points painted per frame (10-500)")
    parser.add_argument("--max-size", type=int, help="Largest working image dimension")
    parser.add_argument(
        "--auto-start", action="store_true", help="Start painting as soon as an image loads"
    )
    parser.add_argument(
        "--config", type=Path, default=CONFIG_FILE, help="Configuration file path"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Launch the painting animator."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # AIDEV-NOTE: CLI values override the persisted config for this run only
    # (speed and auto-start are saved again when the window closes)
    config_manager = ConfigManager(args.config)
    config = config_manager.load()
    if args.gallery:
        config.gallery_dir = args.gallery
    if args.speed is not None:
        config.speed = args.speed
    if args.max_size is not None:
        config.max_size = args.max_size
    if args.auto_start:
        config.auto_start = True

    app = QApplication(sys.argv[:1])
    app.setApplicationDisplayName("ArtReveal")
    app.setApplicationName("ArtReveal")

    # Imported after QApplication so Qt fonts are available
    from ui.main_window import PaintingWindow

    window = PaintingWindow(config=config.clamped(), config_manager=config_manager)
    window.show()

    if args.image:
        window.open_path(args.image)
    elif window.gallery:
        window.new_painting()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
