#!/usr/bin/env python3
"""
States
======
The discrete units a state engine moves between.

A state is identified by its key. Two states with the same key are the same
state as far as an engine is concerned, so keys must be unique within the
universe of states given to one engine.

There are two kinds of state:
- StringState: wraps a string representation, which is also its key
- UndefinedState: the sentinel for "no state", used as the start and end of
  every sequence an engine learns or generates. Its key is the empty string.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class State(ABC):
    """Base class for engine states."""

    # Only the sentinel overrides this.
    is_undefined = False

    @abstractmethod
    def key(self) -> str:
        """
        A unique string for this state.

        It must not collide with the key of any other state used in the
        same engine.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement key()")

    def is_equal(self, state: 'State') -> bool:
        """True if the provided state is the same as this one."""
        return self.key() == state.key()

    def __eq__(self, other) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self.key())


@dataclass(frozen=True, eq=False)
class StringState(State):
    """A state that is a string."""
    representation: str

    def key(self) -> str:
        return self.representation


@dataclass(frozen=True, eq=False)
class UndefinedState(State):
    """
    The state of an engine before it starts, or after a run of transitions
    comes to an end.
    """
    representation: str = field(default="", init=False)

    is_undefined = True

    def key(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "UndefinedState()"


__all__ = [
    'State',
    'StringState',
    'UndefinedState',
]
