# hardware/gpio_motor.py
"""GPIO feeder motor driven by software PWM (RPi.GPIO)."""

import logging
import time

from feeder.interfaces.motor import MotorInterface
from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PERIOD_MS = 10


def clamp_duty_cycle(speed: int) -> int:
    return max(0, min(100, int(speed)))


class GpioMotor(MotorInterface):
    """
    Feeder motor on a single GPIO pin.

    run() drives the PWM for the whole step duration and leaves the pin LOW
    before returning, whether the step succeeded or not. The motor is never
    left energised between steps or after an aborted cycle. Off a Raspberry
    Pi (or without RPi.GPIO installed) the motor reports not-initialized and
    every command fails.
    """

    def __init__(
        self,
        pin: int = 4,
        gpio=None,
        log: logging.Logger | None = None,
        sleep=time.sleep,
    ):
        """
        Args:
            pin: BCM pin number of the motor controller input.
            gpio: GPIO module to use (RPi.GPIO if not provided).
            log: Logger for hardware reports.
            sleep: Blocks for the given seconds while the PWM runs.
        """
        self.pin = pin
        self._log = log or logger
        self._sleep = sleep
        self._gpio = None
        self._pwm = None
        self._period_ms = DEFAULT_PERIOD_MS
        self._pwm_running = False
        self._init_gpio(gpio)

    def _init_gpio(self, gpio) -> None:
        try:
            if gpio is None:
                import RPi.GPIO as gpio

            gpio.setmode(gpio.BCM)
            gpio.setup(self.pin, gpio.OUT, initial=gpio.LOW)
            self._pwm = gpio.PWM(self.pin, 1000.0 / self._period_ms)
            self._gpio = gpio
            self._log.info(f"Motor initialized on GPIO pin {self.pin}")
        except Exception as e:
            self._gpio = None
            self._pwm = None
            self._log.error(f"Failed to initialize GPIO pin {self.pin} for motor control: {e}")

    @property
    def pwm_running(self) -> bool:
        return self._pwm_running

    def is_initialized(self) -> bool:
        return self._gpio is not None and self._pwm is not None

    def _drive_low(self) -> bool:
        """Stops the PWM and pulls the pin LOW."""
        try:
            if self._pwm_running:
                self._pwm.stop()
                self._pwm_running = False
            self._gpio.output(self.pin, self._gpio.LOW)
        except Exception as e:
            self._log.error(f"GPIO error while stopping motor: {e}")
            return False
        return True

    def run(self, speed: int, ramp: int, duration_ms: int) -> bool:
        if not self.is_initialized():
            self._log.error("Cannot run motor: GPIO not initialized")
            return False

        duty_cycle = clamp_duty_cycle(speed)
        try:
            if ramp > 0 and ramp != self._period_ms:
                self._pwm.ChangeFrequency(1000.0 / ramp)
                self._period_ms = ramp
            self._pwm.start(duty_cycle)
            self._pwm_running = True
            self._log.debug(
                f"Running motor at {duty_cycle}% duty cycle for {duration_ms}ms..."
            )
            self._sleep(max(0, duration_ms) / 1000.0)
        except Exception as e:
            self._log.error(f"GPIO error while running motor: {e}")
            self._drive_low()
            return False

        return self._drive_low()

    def stop(self) -> bool:
        if not self.is_initialized():
            return False
        if not self._drive_low():
            return False
        self._log.debug("Motor stopped")
        return True

    def close(self) -> None:
        if not self.is_initialized():
            return
        self.stop()
        try:
            self._gpio.cleanup(self.pin)
        except Exception as e:
            self._log.debug(f"GPIO cleanup failed: {e}")
        finally:
            self._gpio = None
            self._pwm = None
