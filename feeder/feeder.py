# ------------------------------------------------------------------------------
# Feeder Module for Detection-Triggered Feeding
# feeder/feeder.py
# ------------------------------------------------------------------------------
"""
This module defines the Feeder class, which reacts to fish detection results
by running the motor sequence and archiving the detection image.
"""

import logging
from pathlib import Path

from config import get_config
from feeder.interfaces.archive import ArchiveInterface
from feeder.interfaces.detection import FishDetectionCallbackInterface
from feeder.interfaces.motor import MotorInterface
from feeder.motor_sequence import MotorSequence, load_motor_sequence
from feeder.services.archive_service import ImageArchiver
from feeder.services.sequence_runner import CycleResult, SequenceRunner
from logging_config import get_logger

logger = get_logger(__name__)


class Feeder(FishDetectionCallbackInterface):
    """
    Controls the feeding mechanism.

    Key Responsibilities:
    - Loads the motor sequence once, at construction.
    - Owns the motor for its whole lifetime (or runs without one in test mode).
    - Runs a feeding cycle on every fish detection.
    - Archives every detection image tagged with its outcome.

    No public method raises; failures are reported through the logger only.
    """

    def __init__(
        self,
        motor_pin: int | None = None,
        config_path: str | Path | None = None,
        archive_dir: str | Path | None = None,
        motor: MotorInterface | None = None,
        archiver: ArchiveInterface | None = None,
        log: logging.Logger | None = None,
        ramp: int | None = None,
        wait=None,
    ):
        """
        Args:
            motor_pin: GPIO pin of the feeder motor. A negative pin runs the
                feeder in test mode without hardware. Ignored if motor is given.
            config_path: Motor sequence config file.
            archive_dir: Directory for detection images.
            motor: Already constructed motor to take ownership of.
            archiver: Archive implementation (ImageArchiver if not provided).
            log: Logger shared with the feeder's components.
            ramp: Ramp parameter for every motor run.
            wait: Step wait function handed to the SequenceRunner.
        """
        cfg = get_config()
        self._log = log or logger

        if motor_pin is None:
            motor_pin = cfg["MOTOR_PIN"]
        if ramp is None:
            ramp = cfg["MOTOR_RAMP_MS"]

        if motor is not None:
            self._motor = motor
            self._log.info("Feeder initialized with provided motor")
        elif motor_pin >= 0:
            from hardware.gpio_motor import GpioMotor

            self._motor = GpioMotor(motor_pin, log=self._log)
            self._log.info(f"Feeder initialized with motor on pin {motor_pin}")
        else:
            self._motor = None
            self._log.info("Feeder initialized in test mode without hardware")

        self._config_path = config_path or cfg["FEEDER_CONFIG_PATH"]
        self._sequence = load_motor_sequence(self._config_path, self._log)

        self._runner = SequenceRunner(self._motor, ramp=ramp, log=self._log, wait=wait)
        self._archiver = archiver or ImageArchiver(
            archive_dir or cfg["ARCHIVE_DIR"], log=self._log
        )

    @property
    def motor(self) -> MotorInterface | None:
        """The owned motor, None in test mode."""
        return self._motor

    @property
    def sequence(self) -> MotorSequence:
        return self._sequence

    @property
    def archiver(self) -> ArchiveInterface:
        return self._archiver

    @property
    def runner(self) -> SequenceRunner:
        return self._runner

    def fish_detected(self, image) -> None:
        self._log.info("FISH DETECTED! Activating feeding mechanism...")
        self.activate_feeder()
        self.save_image(image, True)

    def no_fish_detected(self, image) -> None:
        self._log.info("No feeding necessary.")
        self.save_image(image, False)

    def activate_feeder(self) -> CycleResult:
        """Runs one feeding cycle with the loaded motor sequence."""
        return self._runner.run(self._sequence)

    def save_image(self, image, fish_detected: bool):
        """Archives the detection image tagged with the outcome."""
        return self._archiver.save_image(image, fish_detected)

    def close(self) -> None:
        """Releases the motor."""
        if self._motor is None:
            return
        try:
            self._motor.close()
        except Exception as e:
            self._log.error(f"Failed to release motor: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
