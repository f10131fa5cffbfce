"""Shared Rich consoles with custom theme for consistent output."""

from rich.console import Console
from rich.theme import Theme

# Named styles for semantic consistency
custom_theme = Theme({
    "heading": "bold cyan",
    "current": "bold green",
    "previous": "dim",
    "next": "yellow",
    "muted": "dim",
})

# Singleton console instances
console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)
