"""Finite state machine with asynchronous transitions.

States are plain definition mappings. Each one may define hooks
(``setup``, ``on_enter``, ``on_leave``) and arbitrary fields; every state
can reach the machine through ``goto``, ``curr``, ``next``, ``prev`` and the
shared ``context``.

Example:
    >>> from states.machine import StateMachine
    >>> machine = StateMachine({
    ...     "$common": {"greeting": "hi"},
    ...     "a": {"on_enter": lambda self, prev: 1},
    ...     "b": {},
    ... })
    >>> await machine.setup("a")
    >>> machine.curr.goto("b")
    >>> await machine.update()
    True
    >>> machine.curr.id, machine.prev.id
    ('b', 'a')
"""

from states.machine.machine import Request, StateMachine
from states.machine.state import State, StateContext

__all__ = [
    "Request",
    "State",
    "StateContext",
    "StateMachine",
]
