"""
Archive Interface - Detection Image Storage.

Defines the contract for archiving the image of every detection event.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import numpy as np


@dataclass
class ArchiveResult:
    """
    Result of an archive operation.

    Attributes:
        success: Whether the image was written.
        path: Full path of the archived image.
        filename: Archived filename (e.g., "fish_2024-01-20_12-00-00.jpg").
    """

    success: bool
    path: Path | None = None
    filename: str = ""


class ArchiveInterface(ABC):
    """
    Interface for detection image archival.

    Implementations should handle:
    - Creating the archive directory on demand
    - Outcome-tagged, timestamped filenames
    - Reporting failures without raising
    """

    @abstractmethod
    def save_image(self, image: np.ndarray, fish_detected: bool) -> ArchiveResult:
        """
        Archives an image under a name tagged with the detection outcome.

        Args:
            image: BGR image to save.
            fish_detected: Detection outcome the filename is tagged with.

        Returns:
            ArchiveResult with the path and success status.
        """
        pass

    @abstractmethod
    def clear(self) -> int:
        """
        Removes every archived file.

        Returns:
            Number of files removed.
        """
        pass
