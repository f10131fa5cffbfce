"""State machine engine.

Provides the StateMachine class that registers states, tracks the current,
previous and requested next state, and performs asynchronous transitions
through enter/leave hooks.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from states.core import (
    KEYS,
    AlreadyDoneError,
    AlreadyExistsError,
    MachineStatus,
    NoSuchKeyError,
    ReservedKeyError,
    TransitionError,
)
from states.machine.state import (
    State,
    StateContext,
    as_args,
    bind,
    check_field_name,
    is_private,
    settle,
    to_default,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Request:
    """A requested transition, applied by the next update()."""

    key: Hashable
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


class StateMachine:
    """Finite state machine with asynchronous enter/leave transitions.

    States are registered from definition mappings. Every state answers to
    every public field any state defines: fields it lacks resolve to the
    machine prototype, which holds zero-value defaults plus the fields of
    the ``"$common"`` definition.

    Hooks a definition may provide, all optional, sync or async:

    - ``setup(self, *args)``: called for every state by :meth:`setup`
    - ``on_enter(self, prev, *args, **kwargs)``: called on the incoming
      state, its result is handed to ``on_leave``
    - ``on_leave(self, next, entered)``: called on the outgoing state

    Example:
        >>> machine = StateMachine({
        ...     "idle": {"on_leave": lambda self, next, entered: print(entered)},
        ...     "busy": {"on_enter": lambda self, prev, job: job, "jobs": 0},
        ... })
        >>> await machine.setup()
        >>> machine.curr.goto("busy", "build")
        >>> await machine.update()
        build
        True
    """

    def __init__(
        self,
        definitions: Mapping[Hashable, Mapping[str, Any]] | None = None,
    ) -> None:
        self._states: dict[Hashable, State] = {}
        self._prototype: dict[str, Any] = {}
        self._context: StateContext | None = None
        self._curr: Hashable | None = None
        self._prev: Hashable | None = None
        self._pending: Request | None = None
        self._transitioning = False

        for key, definition in (definitions or {}).items():
            self.add(key, definition)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, key: object) -> bool:
        return key in self._states

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._states)

    def __repr__(self) -> str:
        return (
            f"StateMachine(states={list(self._states)!r}, "
            f"curr={self._curr!r}, status={self.status.value!r})"
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def curr(self) -> State | None:
        """The current state."""
        return None if self._curr is None else self._states.get(self._curr)

    @property
    def prev(self) -> State | None:
        """The previous state."""
        return None if self._prev is None else self._states.get(self._prev)

    @property
    def next(self) -> State | None:
        """The requested next state, if the request names a known state."""
        if self._pending is None:
            return None
        return self._states.get(self._pending.key)

    @property
    def context(self) -> StateContext | None:
        """Context shared by all states, once created."""
        return self._context

    @property
    def prototype(self) -> Mapping[str, Any]:
        """Read-only view of the default fields shared by all states."""
        return MappingProxyType(self._prototype)

    @property
    def status(self) -> MachineStatus:
        if self._curr is None:
            return MachineStatus.UNINITIALIZED
        if self._transitioning:
            return MachineStatus.TRANSITIONING
        return MachineStatus.READY

    def get(self, key: Hashable, default: State | None = None) -> State | None:
        """Return the state registered under key, current or not."""
        return self._states.get(key, default)

    def keys(self) -> list[Hashable]:
        """Return state keys in registration order."""
        return list(self._states)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add(self, key: Hashable, definition: Mapping[str, Any]) -> State | None:
        """Register a state built from a definition.

        Fields starting with ``_`` are private to the state. Other fields
        also install a zero-value default on the prototype, so every state
        answers to them. Adding ``"$common"`` merges its fields into the
        prototype instead of creating a state.

        Args:
            key: State key. Re-adding a key replaces the state.
            definition: Mapping of field name to value.

        Returns:
            The new state, or None for ``"$common"``.

        Raises:
            ValueError: If key is None.
            TypeError: If a field name is not a string.
            ReservedKeyError: If a field name is reserved.
        """
        if key is None:
            raise ValueError("State key must not be None")

        for name in definition:
            check_field_name(name)

        if key == KEYS.common:
            self._prototype.update(definition)
            logger.debug("Merged common fields: %s", ", ".join(definition))
            return None

        state = State(key, self)
        for name, value in definition.items():
            if name in vars(state):
                raise ReservedKeyError(name)
            if not is_private(name) and name not in self._prototype:
                self._prototype[name] = to_default(value)
            setattr(state, name, bind(state, value))

        if key in self._states:
            logger.debug("Replacing state %r", key)
        self._states[key] = state
        return state

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def setup(
        self,
        initial: Hashable | None = None,
        args: Mapping[Hashable, Any] | None = None,
    ) -> list[Any]:
        """Set the initial state and run the setup hook of every state.

        Args:
            initial: Initial state key. Defaults to the first registered state.
            args: Arguments for ``setup()`` of each state, by state key.
                A list or tuple is spread, any other value is passed alone.

        Returns:
            Results of the setup hooks, in registration order.

        Raises:
            AlreadyDoneError: If setup already ran.
            NoSuchKeyError: If the initial key is not registered.

        Example:
            >>> await machine.setup("stateA", {
            ...     "stateA": "arg1",
            ...     "stateB": ["arg1", "arg2"],
            ...     "stateC": [[1, 2, 3], ["a", "b", "c"]],
            ... })
        """
        if self._curr is not None:
            raise AlreadyDoneError("setup")
        if initial is None:
            initial = next(iter(self._states), None)
            if initial is None:
                raise NoSuchKeyError(None)
        elif initial not in self._states:
            raise NoSuchKeyError(initial)

        if self._context is None:
            self.set_context()
        self._curr = initial
        logger.debug("Initial state: %r", initial)

        args = args or {}
        results: list[Any] = []
        try:
            for key, state in self._states.items():
                hook = getattr(state, "setup", None)
                if callable(hook):
                    results.append(hook(*as_args(args.get(key))))
        except Exception:
            # Coroutines from earlier hooks will never be awaited
            for result in results:
                if inspect.iscoroutine(result):
                    result.close()
            raise

        return list(await asyncio.gather(*(settle(r) for r in results)))

    def set_context(self, data: Mapping[str, Any] | None = None) -> StateContext:
        """Create the context shared by all states.

        Args:
            data: Initial context fields.

        Returns:
            The new context.

        Raises:
            AlreadyExistsError: If the machine already has a context.
        """
        if self._context is not None:
            raise AlreadyExistsError(self._context)
        self._context = StateContext(data)
        return self._context

    def set_next(self, key: Hashable, *args: Any, **kwargs: Any) -> None:
        """Request a transition, applied by the next update().

        A request still pending is overridden, with a warning.

        Args:
            key: Key of the next state. Validated by update().
            *args: Positional arguments for ``on_enter()`` of the next state.
            **kwargs: Keyword arguments for ``on_enter()`` of the next state.
        """
        if self._pending is not None:
            logger.warning(
                "set_next(): pending request %r overridden by %r",
                self._pending.key,
                key,
            )
        self._pending = Request(key, args, kwargs)

    async def update(self) -> bool:
        """Perform the requested transition, if any.

        Awaits ``on_enter`` of the next state, then ``on_leave`` of the
        current state with the enter result. Pointers move only once both
        hooks succeed.

        Returns:
            True if a transition happened, False if none was requested.

        Raises:
            NoSuchKeyError: If the requested state is not registered.
            TransitionError: If a hook fails. The original exception is
                chained as ``__cause__``.
        """
        request = self._pending
        if request is None:
            return False
        incoming = self._states.get(request.key)
        if incoming is None:
            raise NoSuchKeyError(request.key)
        outgoing = self.curr

        self._transitioning = True
        try:
            entered = await _run_hook(
                incoming, "on_enter", outgoing, *request.args, **request.kwargs
            )
            if outgoing is not None:
                await _run_hook(outgoing, "on_leave", incoming, entered)
        except Exception as e:
            logger.exception(
                "update(): transition %r -> %r failed", self._curr, request.key
            )
            raise TransitionError(request.key) from e
        finally:
            self._transitioning = False

        self._prev, self._curr = self._curr, request.key
        # A hook may have requested another transition meanwhile
        if self._pending is request:
            self._pending = None
        logger.debug("Transition %r -> %r", self._prev, self._curr)
        return True


async def _run_hook(state: State, name: str, *args: Any, **kwargs: Any) -> Any:
    """Call a hook if the state has one and wait for its result."""
    hook = getattr(state, name, None)
    if not callable(hook):
        return None
    return await settle(hook(*args, **kwargs))
