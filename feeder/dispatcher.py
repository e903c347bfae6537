# feeder/dispatcher.py
import logging

from feeder.interfaces.detection import FishDetectionCallbackInterface
from logging_config import get_logger

logger = get_logger(__name__)


class DetectionDispatcher:
    """
    Fans detection results out to every registered callback.

    Callbacks are called in registration order. A failing callback is logged
    and does not keep the others from being notified.
    """

    def __init__(self, log: logging.Logger | None = None):
        self._callbacks: list[FishDetectionCallbackInterface] = []
        self._log = log or logger

    def register_callback(self, callback: FishDetectionCallbackInterface) -> None:
        self._callbacks.append(callback)

    @property
    def callbacks(self) -> list[FishDetectionCallbackInterface]:
        return list(self._callbacks)

    def dispatch(self, image, fish_detected: bool) -> None:
        """Delivers one detection result to all callbacks."""
        for callback in self._callbacks:
            try:
                if fish_detected:
                    callback.fish_detected(image)
                else:
                    callback.no_fish_detected(image)
            except Exception as e:
                self._log.error(
                    f"Detection callback {type(callback).__name__} failed: {e}",
                    exc_info=True,
                )
