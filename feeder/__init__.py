"""
Fish Feeder Package.

ARCHITECTURE:
- interfaces/ holds the contracts (motor, detection callback, archive)
- services/ holds the implementations used by the Feeder
- Feeder only coordinates: it loads the motor sequence, owns the motor and
  hands detection events to the SequenceRunner and the ImageArchiver
"""
