"""
Detection Interface - Fish Detection Callbacks.

Defines the contract between the external detection pipeline and the
components reacting to its results.
"""

from abc import ABC, abstractmethod

import numpy as np


class FishDetectionCallbackInterface(ABC):
    """
    Receives the outcome of one detection event.

    The detection pipeline decides "fish" or "no fish" and hands over the
    decoded BGR image it looked at.
    """

    @abstractmethod
    def fish_detected(self, image: np.ndarray) -> None:
        """Called when fish were found in the image."""
        pass

    @abstractmethod
    def no_fish_detected(self, image: np.ndarray) -> None:
        """Called when the image contains no fish."""
        pass
