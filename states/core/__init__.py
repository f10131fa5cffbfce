"""Core configuration, enums and errors.

The leaf modules here have no imports from other states modules outside core/.
"""

from states.core.constants import KEYS, StateKeys
from states.core.enums import MachineStatus
from states.core.errors import (
    AlreadyDoneError,
    AlreadyExistsError,
    NoSuchKeyError,
    ReservedKeyError,
    StatesError,
    TransitionError,
)

__all__ = [
    "KEYS",
    "AlreadyDoneError",
    "AlreadyExistsError",
    "MachineStatus",
    "NoSuchKeyError",
    "ReservedKeyError",
    "StateKeys",
    "StatesError",
    "TransitionError",
]
