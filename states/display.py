"""Rich-based snapshot of a state machine.

Renders one row per registered state, marking the current, previous and
requested next state, with the public fields each state defines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from states.console import console as default_console
from states.console import custom_theme
from states.machine.state import public_fields

if TYPE_CHECKING:
    from rich.console import Console

    from states.machine import State, StateMachine

# Role name → marker shown in the role column
ROLE_MARKERS: dict[str, str] = {
    "current": "●",
    "previous": "◌",
    "next": "→",
}


def _truncate(text: str, max_len: int = 40) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _roles(machine: StateMachine, state: State) -> list[str]:
    """Return the roles a state currently plays, in display order."""
    roles = []
    if state is machine.curr:
        roles.append("current")
    if state is machine.prev:
        roles.append("previous")
    if state is machine.next:
        roles.append("next")
    return roles


def _role_text(roles: list[str]) -> Text:
    text = Text()
    for i, role in enumerate(roles):
        if i:
            text.append(" ")
        text.append(f"{ROLE_MARKERS[role]} {role}", style=custom_theme.styles[role])
    return text


def render_machine(machine: StateMachine, *, title: str = "States") -> Table:
    """Build a table describing every state of the machine.

    Args:
        machine: Machine to describe.
        title: Table title.

    Returns:
        Rich table, captioned with the machine status.
    """
    table = Table(
        title=title,
        caption=f"status: {machine.status.value}",
        title_style=custom_theme.styles["heading"],
    )
    table.add_column("State", no_wrap=True)
    table.add_column("Role")
    table.add_column("Fields", style=custom_theme.styles["muted"])

    for key in machine:
        state = machine.get(key)
        fields = ", ".join(public_fields(state))
        table.add_row(str(key), _role_text(_roles(machine, state)), _truncate(fields))
    return table


def print_machine(machine: StateMachine, *, console: Console | None = None) -> None:
    """Print the machine table to the given console (shared one by default)."""
    (console or default_console).print(render_machine(machine))
