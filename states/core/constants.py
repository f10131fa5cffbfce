"""Centralized configuration constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StateKeys:
    """Naming conventions for state keys and definition fields."""

    common: str = "$common"  # Merged into the shared prototype, never a state
    reserved_prefix: str = "$"
    private_prefix: str = "_"


# Singleton config
KEYS = StateKeys()
