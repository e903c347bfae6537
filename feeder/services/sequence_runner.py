"""
Sequence Runner - Feeder Motor Actuation.

Runs one feeding cycle: drives the motor through every step of the motor
sequence in order and stops it afterwards.

Cycle states:
    IDLE -> RUNNING -> COMPLETED | ABORTED

A cycle never leaves IDLE when the motor is missing or not initialized.
The first failed run aborts the cycle without stopping the motor. A failed
stop after a successful sequence is reported but the cycle still completes.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from feeder.interfaces.motor import MotorInterface
from feeder.motor_sequence import MotorStep
from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_RAMP_MS = 10


class CycleState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class CycleResult:
    """
    Outcome of one feeding cycle.

    Attributes:
        state: Terminal state of the cycle (IDLE if it never started).
        steps_started: Number of motor run invocations.
        stop_ok: Result of the final stop, None if stop was not invoked.
    """

    state: CycleState
    steps_started: int = 0
    stop_ok: bool | None = None


class SequenceRunner:
    """
    Drives a motor through a motor sequence.

    The wait after each step is a cancellable timed wait: cancel() ends the
    current wait early and aborts the cycle before the next step.
    """

    def __init__(
        self,
        motor: MotorInterface | None,
        ramp: int = DEFAULT_RAMP_MS,
        log: logging.Logger | None = None,
        wait: Callable[[float], bool] | None = None,
    ):
        """
        Args:
            motor: Motor to drive, None when running without hardware.
            ramp: Ramp parameter passed to every motor run.
            log: Logger for cycle reports (module logger if not provided).
            wait: Blocks for the given seconds; returns True if cancelled.
        """
        self._motor = motor
        self._ramp = ramp
        self._log = log or logger
        self._cancel_event = threading.Event()
        self._wait = wait or self._cancel_event.wait
        self.state = CycleState.IDLE

    def cancel(self) -> None:
        """Interrupts the step wait of a running cycle."""
        self._cancel_event.set()

    def _motor_ready(self) -> bool:
        if self._motor is None:
            return False
        try:
            return bool(self._motor.is_initialized())
        except Exception as e:
            self._log.debug(f"Motor initialization check failed: {e}")
            return False

    def _finish(self, state: CycleState, steps_started: int, stop_ok=None):
        self.state = state
        return CycleResult(state=state, steps_started=steps_started, stop_ok=stop_ok)

    def run(self, sequence: Iterable[MotorStep]) -> CycleResult:
        """
        Runs one feeding cycle.

        Never raises; hardware failures are logged and reflected in the
        returned CycleResult.
        """
        self.state = CycleState.IDLE
        if not self._motor_ready():
            self._log.error("Cannot activate feeder: Motor not initialized")
            return CycleResult(state=CycleState.IDLE)

        motor = self._motor
        self._cancel_event.clear()
        self.state = CycleState.RUNNING
        self._log.info("*** FEEDING MECHANISM ACTIVATED ***")

        steps_started = 0
        for step in sequence:
            self._log.info(
                f"Running feeder motor at speed {step.speed} for {step.duration_ms}ms"
            )
            steps_started += 1
            try:
                ok = motor.run(step.speed, self._ramp, step.duration_ms)
            except Exception as e:
                self._log.error(f"Motor run failed: {e}", exc_info=True)
                return self._finish(CycleState.ABORTED, steps_started)
            if not ok:
                self._log.error("Motor run failed!")
                return self._finish(CycleState.ABORTED, steps_started)

            if self._wait(step.duration_ms / 1000.0):
                self._log.warning("Feeding cycle cancelled.")
                return self._finish(CycleState.ABORTED, steps_started)

        try:
            stop_ok = bool(motor.stop())
        except Exception as e:
            self._log.error(f"Motor stop failed: {e}", exc_info=True)
            return self._finish(CycleState.COMPLETED, steps_started, stop_ok=False)

        if stop_ok:
            self._log.info("Feeder motor stopped.")
        else:
            self._log.error("Motor stop failed!")
        return self._finish(CycleState.COMPLETED, steps_started, stop_ok=stop_ok)
