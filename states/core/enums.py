"""Core enums for the state machine."""

from enum import StrEnum


class MachineStatus(StrEnum):
    """Machine-level lifecycle status."""

    UNINITIALIZED = "uninitialized"  # setup() not called yet
    READY = "ready"  # Current state set, no update() in flight
    TRANSITIONING = "transitioning"  # update() in flight
