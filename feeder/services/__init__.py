"""
Feeder Services.

Concrete implementations used by the Feeder:
- SequenceRunner drives the motor through one feeding cycle
- ImageArchiver implements ArchiveInterface for detection images
"""

from feeder.services.archive_service import ImageArchiver
from feeder.services.sequence_runner import CycleResult, CycleState, SequenceRunner

__all__ = [
    "CycleResult",
    "CycleState",
    "ImageArchiver",
    "SequenceRunner",
]
