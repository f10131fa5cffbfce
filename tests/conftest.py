"""Root test fixtures shared across unit and integration tests.

Module-specific fixtures are in:
- tests/unit/conftest.py (unit test documentation)
- tests/integration/conftest.py (integration test documentation)
"""

from __future__ import annotations

from typing import Any

import pytest

from states import StateMachine

# ============================================================================
# Machine Fixtures
# ============================================================================


@pytest.fixture
def events() -> list[tuple[Any, ...]]:
    """Hook calls recorded by the machine fixture, in call order."""
    return []


@pytest.fixture
def machine(events: list[tuple[Any, ...]]) -> StateMachine:
    """Machine with states a, b and c recording every hook call.

    a and b define on_enter and on_leave; c only defines on_enter.
    """

    def on_enter(self, prev, *args, **kwargs):
        events.append(("enter", self.id, prev.id if prev else None, args, kwargs))
        return f"entered {self.id}"

    def on_leave(self, next, entered):
        events.append(("leave", self.id, next.id, entered))

    return StateMachine({
        "a": {"on_enter": on_enter, "on_leave": on_leave},
        "b": {"on_enter": on_enter, "on_leave": on_leave},
        "c": {"on_enter": on_enter},
    })
