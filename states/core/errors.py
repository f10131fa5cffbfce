"""Exceptions raised by the state machine."""

from typing import Any


class StatesError(Exception):
    """Base class for state machine errors.

    Attributes:
        cause: The key or value that triggered the error.
    """

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self.cause = cause


class ReservedKeyError(StatesError):
    """A definition field uses a reserved name."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Reserved key: {field!r}", field)


class NoSuchKeyError(StatesError, KeyError):
    """No state is registered under the key."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"No such state: {key!r}", key)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class AlreadyDoneError(StatesError):
    """A one-time operation was called again."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Already done: {operation}", operation)


class AlreadyExistsError(StatesError):
    """The machine already has a context."""

    def __init__(self, existing: Any) -> None:
        super().__init__("Context already exists", existing)


class TransitionError(StatesError):
    """An on_enter or on_leave hook failed during a transition."""

    def __init__(self, key: Any) -> None:
        super().__init__(f"Transition to {key!r} failed", key)
