"""
Feeder Interfaces.

Abstract contracts for the collaborators of the feeder:
- MotorInterface: the actuation hardware
- FishDetectionCallbackInterface: receivers of detection results
- ArchiveInterface: storage of detection images

Concrete implementations live in feeder/services/ and hardware/.
"""

from feeder.interfaces.archive import ArchiveInterface, ArchiveResult
from feeder.interfaces.detection import FishDetectionCallbackInterface
from feeder.interfaces.motor import MotorInterface

__all__ = [
    # Interfaces
    "ArchiveInterface",
    "FishDetectionCallbackInterface",
    "MotorInterface",
    # Data Classes
    "ArchiveResult",
]
