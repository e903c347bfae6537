"""
Archive Service - Detection Image Storage.

Implements ArchiveInterface by writing JPEG files into a flat archive
directory:

    <archive>/fish_YYYY-MM-DD_HH-MM-SS.jpg
    <archive>/no_fish_YYYY-MM-DD_HH-MM-SS.jpg

Timestamps are local time with second resolution, so two saves of the same
outcome within one second overwrite each other.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import cv2

from feeder.interfaces.archive import ArchiveInterface, ArchiveResult
from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ARCHIVE_DIR = "../archive"
FISH_PREFIX = "fish_"
NO_FISH_PREFIX = "no_fish_"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def build_archive_filename(fish_detected: bool, capture_time: datetime) -> str:
    """Returns the archive filename for a detection outcome and time."""
    prefix = FISH_PREFIX if fish_detected else NO_FISH_PREFIX
    return f"{prefix}{capture_time.strftime(TIMESTAMP_FORMAT)}.jpg"


class ImageArchiver(ArchiveInterface):
    """
    Saves detection images into the archive directory.

    Failures are logged and reported through ArchiveResult; nothing is
    retried and no alternative location is tried.
    """

    def __init__(
        self,
        archive_dir: str | Path = DEFAULT_ARCHIVE_DIR,
        log: logging.Logger | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Args:
            archive_dir: Directory holding archived images.
            log: Logger for archive reports (module logger if not provided).
            clock: Returns the current local time (datetime.now if not provided).
        """
        self.archive_dir = Path(archive_dir)
        self._log = log or logger
        self._clock = clock or datetime.now

    def ensure_archive_dir(self) -> bool:
        """Creates the archive directory if absent. Returns False on failure."""
        if self.archive_dir.is_dir():
            return True
        try:
            self.archive_dir.mkdir(parents=True)
        except OSError as e:
            self._log.error(f"Could not create archive directory {self.archive_dir}: {e}")
            return False
        self._log.info(f"Created archive directory: {self.archive_dir}")
        return True

    def save_image(self, image, fish_detected: bool) -> ArchiveResult:
        if not self.ensure_archive_dir():
            return ArchiveResult(success=False)

        filename = build_archive_filename(fish_detected, self._clock())
        path = self.archive_dir / filename

        try:
            written = cv2.imwrite(str(path), image)
        except Exception as e:
            self._log.error(f"Could not save image to {path}: {e}")
            return ArchiveResult(success=False, path=path, filename=filename)

        if not written:
            self._log.error(f"Could not save image to {path}")
            return ArchiveResult(success=False, path=path, filename=filename)

        self._log.info(f"Image saved to: {path}")
        return ArchiveResult(success=True, path=path, filename=filename)

    def clear(self) -> int:
        """Empties the archive, creating it when it does not exist yet."""
        if not self.archive_dir.is_dir():
            self.ensure_archive_dir()
            return 0

        removed = 0
        for entry in self.archive_dir.iterdir():
            if not entry.is_file():
                continue
            try:
                entry.unlink()
                removed += 1
            except OSError as e:
                self._log.error(f"Could not remove archived file {entry}: {e}")
        self._log.info(f"Archive cleared: {removed} file(s) removed.")
        return removed
