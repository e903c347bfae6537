"""Hardware adapters for the feeder."""

from hardware.gpio_motor import GpioMotor

__all__ = ["GpioMotor"]
