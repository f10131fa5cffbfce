"""State objects and the context shared between them.

A State is built from a definition mapping. Attribute lookup on a state goes
through, in order:

1. The State class itself (``id``, ``machine``, ``goto``, ``curr``, ``next``,
   ``prev``, ``context``)
2. Fields the state owns (copied from its definition)
3. The prototype of the owning machine (``$common`` fields and zero-value
   defaults for every public field any state defines)

Plain functions are bound to the state, so hooks receive it as ``self`` and
reach their machine through it.
"""

from __future__ import annotations

import inspect
from collections.abc import Hashable, Mapping
from types import FunctionType, MethodType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from states.core import KEYS, ReservedKeyError

if TYPE_CHECKING:
    from states.machine.machine import StateMachine


class StateContext(BaseModel):
    """Data shared by every state of one machine.

    Fields are free-form: the initial mapping becomes attributes, and states
    may set new ones at any time.

    Example:
        >>> ctx = StateContext({"score": 0})
        >>> ctx.score += 1
        >>> ctx.lives = 3
    """

    model_config = ConfigDict(extra="allow")

    def __init__(self, data: Mapping[str, Any] | None = None, **fields: Any) -> None:
        if data is not None and not isinstance(data, Mapping):
            raise TypeError(
                f"Context data must be a mapping, got {type(data).__name__}"
            )
        super().__init__(**{**(data or {}), **fields})


class State:
    """A named state registered on a StateMachine."""

    def __init__(self, key: Hashable, machine: StateMachine) -> None:
        self.__id = key
        self.__machine = machine

    def __getattr__(self, name: str) -> Any:
        # Only reached when the class and the instance both lack the name
        if name.startswith("_State__"):
            raise AttributeError(name)
        try:
            value = self.__machine.prototype[name]
        except KeyError:
            raise AttributeError(
                f"State {self.__id!r} has no field {name!r}"
            ) from None
        return bind(self, value)

    def __repr__(self) -> str:
        return f"State({self.__id!r})"

    @property
    def id(self) -> Hashable:
        """Key this state is registered under."""
        return self.__id

    @property
    def machine(self) -> StateMachine:
        """Machine owning this state."""
        return self.__machine

    @property
    def curr(self) -> State | None:
        return self.__machine.curr

    @property
    def next(self) -> State | None:
        return self.__machine.next

    @property
    def prev(self) -> State | None:
        return self.__machine.prev

    @property
    def context(self) -> StateContext | None:
        return self.__machine.context

    def goto(self, key: Hashable, *args: Any, **kwargs: Any) -> None:
        """Request a transition to the state registered under ``key``.

        The arguments are passed to ``on_enter`` of that state when the
        machine next updates.
        """
        self.__machine.set_next(key, *args, **kwargs)


# Names every state already answers to through its class
RESERVED_NAMES = frozenset(dir(State))


def check_field_name(name: Any) -> None:
    """Validate a definition field name.

    Raises:
        TypeError: If name is not a string
        ReservedKeyError: If name starts with the reserved prefix or shadows
            a State accessor
    """
    if not isinstance(name, str):
        raise TypeError(f"Field names must be strings, got {name!r}")
    if name.startswith(KEYS.reserved_prefix) or name in RESERVED_NAMES:
        raise ReservedKeyError(name)


def is_private(name: str) -> bool:
    """Private fields stay on their state and get no prototype default."""
    return name.startswith(KEYS.private_prefix)


def public_fields(state: State) -> dict[str, Any]:
    """Return the public fields a state owns, excluding prototype defaults."""
    return {k: v for k, v in vars(state).items() if not is_private(k)}


def bind(state: State, value: Any) -> Any:
    """Bind plain functions to the state so they behave like methods."""
    if isinstance(value, FunctionType):
        return MethodType(value, state)
    return value


def _noop(self: State, *args: Any, **kwargs: Any) -> None:
    """Stand-in for a function field the state does not define."""


def to_default(value: Any) -> Any:
    """Return the zero value matching the type of a definition field."""
    if callable(value):
        return _noop
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 0
    if isinstance(value, float):
        return 0.0
    if isinstance(value, str):
        return ""
    return None


def as_args(value: Any) -> tuple[Any, ...]:
    """Coerce a value into positional arguments.

    Lists and tuples are spread, ``None`` gives no arguments, anything else
    becomes a single argument.
    """
    if value is None:
        return ()
    if isinstance(value, list | tuple):
        return tuple(value)
    return (value,)


async def settle(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
