from .base import Collaborator, Encoder, Helper, Scanner, Weapon
from .simple import LoggingWeapon, NullScanner, RecordingHelper, ShiftEncoder

__all__ = [
    "Collaborator",
    "Encoder",
    "Helper",
    "Scanner",
    "Weapon",
    "LoggingWeapon",
    "NullScanner",
    "RecordingHelper",
    "ShiftEncoder",
]
