"""Save generated image bytes as a named file for display and download.

Each session owns one image directory. A new image overwrites the previous
one, so a session never holds more than one file, and the directory is
removed when the session ends.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def create_image_dir() -> Path:
    """Create a private temporary directory for one session's image."""
    directory = Path(tempfile.mkdtemp(prefix="profilegen-"))
    logger.debug(f"Created image directory {directory}")
    return directory


def save_image_file(image_bytes: bytes, filename: str, directory: Path) -> Path:
    """Write image bytes to ``directory / filename``, replacing any earlier image.

    Args:
        image_bytes: Raw image data
        filename: Suggested download filename (e.g. github-profile-image.png)
        directory: Session image directory

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / filename
    path.write_bytes(image_bytes)
    logger.info(f"Saved image ({len(image_bytes)} bytes) to {path}")
    return path


def remove_image_dir(directory: Path | None) -> None:
    """Delete a session image directory and everything in it."""
    if directory is None:
        return
    shutil.rmtree(directory, ignore_errors=True)
    logger.info(f"Removed image directory {directory}")
