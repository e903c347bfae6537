"""
Motor Interface - Feeder Actuation Hardware.

Defines the contract for the motor that drives the feeding mechanism.
"""

from abc import ABC, abstractmethod


class MotorInterface(ABC):
    """
    Interface for the feeder motor.

    Every operation is fallible and reports its outcome; callers must never
    assume the hardware succeeded.
    """

    @abstractmethod
    def is_initialized(self) -> bool:
        """
        Checks if the motor hardware was set up successfully.

        Returns:
            True if the motor can accept run/stop commands.
        """
        pass

    @abstractmethod
    def run(self, speed: int, ramp: int, duration_ms: int) -> bool:
        """
        Runs the motor.

        Args:
            speed: Duty cycle in percent (0-100).
            ramp: PWM period in milliseconds.
            duration_ms: How long to drive the motor.

        Returns:
            True if the motor ran, False on hardware failure.
        """
        pass

    @abstractmethod
    def stop(self) -> bool:
        """
        Stops the motor immediately.

        Returns:
            True if the motor was stopped.
        """
        pass

    def close(self) -> None:
        """Releases the hardware. Safe to call more than once."""
        pass
