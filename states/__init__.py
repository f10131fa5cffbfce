"""states - finite state machine with asynchronous enter/leave transitions."""

from states.core import (
    AlreadyDoneError,
    AlreadyExistsError,
    MachineStatus,
    NoSuchKeyError,
    ReservedKeyError,
    StatesError,
    TransitionError,
)
from states.machine import State, StateContext, StateMachine

__all__ = [
    "AlreadyDoneError",
    "AlreadyExistsError",
    "MachineStatus",
    "NoSuchKeyError",
    "ReservedKeyError",
    "State",
    "StateContext",
    "StateMachine",
    "StatesError",
    "TransitionError",
]
