"""
Tests for States
================
Identity, equality and the undefined sentinel.
"""

from dataclasses import FrozenInstanceError

import pytest

from stateengines.states import State, StringState, UndefinedState


class TestStringState:
    """Tests for StringState."""

    def test_key_is_representation(self):
        assert StringState("na").key() == "na"

    def test_equal_when_keys_equal(self):
        assert StringState("a").is_equal(StringState("a"))
        assert StringState("a") == StringState("a")

    def test_not_equal_when_keys_differ(self):
        assert not StringState("a").is_equal(StringState("b"))
        assert StringState("a") != StringState("b")

    def test_hashes_by_key(self):
        """Equal states collapse in sets and dict keys."""
        states = {StringState("a"), StringState("a"), StringState("b")}
        assert len(states) == 2

    def test_not_undefined(self):
        assert StringState("a").is_undefined is False

    def test_immutable(self):
        state = StringState("a")
        with pytest.raises(FrozenInstanceError):
            state.representation = "b"

    def test_not_equal_to_plain_string(self):
        assert StringState("a") != "a"


class TestUndefinedState:
    """Tests for the undefined sentinel."""

    def test_key_is_empty_string(self):
        assert UndefinedState().key() == ""

    def test_is_undefined(self):
        assert UndefinedState().is_undefined is True

    def test_instances_are_equal(self):
        assert UndefinedState() == UndefinedState()

    def test_empty_representation(self):
        assert UndefinedState().representation == ""

    def test_empty_string_state_collides(self):
        """An empty-string state shares the sentinel's key."""
        assert StringState("").is_equal(UndefinedState())


class TestStateBase:
    """Tests for the abstract State class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            State()

    def test_base_key_raises(self):
        class Incomplete(State):
            def key(self):
                return super().key()

        with pytest.raises(NotImplementedError):
            Incomplete().key()
