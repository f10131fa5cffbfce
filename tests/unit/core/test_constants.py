"""Tests for states.core constants and enums."""

import dataclasses

import pytest

from states.core import KEYS, MachineStatus, StateKeys


class TestStateKeys:
    """Tests for the StateKeys config."""

    def test_defaults(self):
        """Should use the documented naming conventions."""
        assert KEYS.common == "$common"
        assert KEYS.reserved_prefix == "$"
        assert KEYS.private_prefix == "_"

    def test_common_key_uses_reserved_prefix(self):
        """The common key can never collide with a valid field name."""
        assert KEYS.common.startswith(KEYS.reserved_prefix)

    def test_is_frozen(self):
        """Config should be immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            KEYS.common = "$shared"  # type: ignore[misc]

    def test_singleton_matches_defaults(self):
        """KEYS should equal a default-constructed StateKeys."""
        assert KEYS == StateKeys()


class TestMachineStatus:
    """Tests for MachineStatus enum."""

    def test_all_statuses_defined(self):
        """All lifecycle statuses exist."""
        assert MachineStatus.UNINITIALIZED.value == "uninitialized"
        assert MachineStatus.READY.value == "ready"
        assert MachineStatus.TRANSITIONING.value == "transitioning"

    def test_status_count(self):
        """Exactly 3 statuses are defined."""
        assert len(MachineStatus) == 3

    def test_compares_as_string(self):
        """StrEnum members compare equal to their value."""
        assert MachineStatus.READY == "ready"
