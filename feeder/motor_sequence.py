# feeder/motor_sequence.py
"""
Motor sequence configuration.

A feeder config file holds one motor step per line:

    <speed> <duration_ms>

Steps run in file order. Blank lines are ignored, malformed lines are skipped
with a warning, and an unreadable or empty file yields the default sequence.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MotorStep:
    """One (speed, duration) pair of a feeding cycle."""

    speed: int
    duration_ms: int


MotorSequence = tuple[MotorStep, ...]

DEFAULT_MOTOR_SEQUENCE: MotorSequence = (
    MotorStep(speed=100, duration_ms=1000),
    MotorStep(speed=50, duration_ms=500),
)


def parse_motor_step(line: str) -> MotorStep | None:
    """
    Parses a single config line.

    Returns:
        MotorStep, or None if the line does not start with two integers.
    """
    parts = line.split()
    if len(parts) < 2:
        return None
    try:
        return MotorStep(speed=int(parts[0]), duration_ms=int(parts[1]))
    except ValueError:
        return None


def load_motor_sequence(
    path: str | Path, log: logging.Logger | None = None
) -> MotorSequence:
    """
    Loads the motor sequence from a config file.

    Never raises; every failure degrades to DEFAULT_MOTOR_SEQUENCE.

    Args:
        path: Path to the feeder config file.
        log: Logger to report problems on (module logger if not provided).

    Returns:
        Non-empty tuple of MotorStep in file order.
    """
    log = log or logger
    steps: list[MotorStep] = []

    try:
        with open(path, encoding="utf-8") as config_file:
            for line in config_file:
                if not line.strip():
                    continue
                step = parse_motor_step(line)
                if step is None:
                    log.warning(f"Invalid line in config file: {line.rstrip()}")
                    continue
                steps.append(step)
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"Could not open config file: {path} ({e}). Using default sequence.")
        return DEFAULT_MOTOR_SEQUENCE

    if not steps:
        log.warning(
            f"No motor sequence found in config file: {path}. Using default sequence."
        )
        return DEFAULT_MOTOR_SEQUENCE

    log.info(f"Motor sequence loaded from config file: {len(steps)} step(s).")
    return tuple(steps)


def save_motor_sequence(path: str | Path, steps) -> None:
    """Writes steps in the config file format, one per line."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as handle:
        for step in steps:
            handle.write(f"{step.speed} {step.duration_ms}\n")
