#!/usr/bin/env python3
"""
State Engine Base Class
=======================
Registry and cursor management shared by all state engines.

Every engine owns:
- a registry of the states it can take on, keyed by State.key()
- an UndefinedState sentinel, registered at construction and never removed
- a current state, which always belongs to the registry
"""

from abc import ABC, abstractmethod
from typing import Dict

from stateengines.states import State, UndefinedState


class StateEngine(ABC):
    """Base class for state engines."""

    def __init__(self):
        # A record of all states that this engine can take on.
        self.allowed_states: Dict[str, State] = {}

        # Set up the undefined state, and set it as the current state.
        self.undefined_state = UndefinedState()
        self.allowed_states[self.undefined_state.key()] = self.undefined_state
        self.current_state: State = self.undefined_state

    @property
    def state_count(self) -> int:
        """Number of registered states, the sentinel included."""
        return len(self.allowed_states)

    def add_allowed_state(self, state: State) -> None:
        """Register a state. Does nothing if its key is already known."""
        key = state.key()
        if key not in self.allowed_states:
            self.allowed_states[key] = state

    def is_allowed_state(self, state: State) -> bool:
        return state.key() in self.allowed_states

    def set_current_state(self, state: State) -> None:
        """
        Set the current state of the engine.

        A state that was never registered resets the engine to the
        undefined state.
        """
        if self.is_allowed_state(state):
            self.current_state = state
        else:
            self.current_state = self.undefined_state

    def set_current_state_to_undefined(self) -> None:
        self.current_state = self.undefined_state

    @abstractmethod
    def transition(self) -> State:
        """
        Move the engine to its next state according to whatever rules it
        follows for determining transitions.

        Returns:
            The new current state; the undefined state if the engine halts.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement transition()")
