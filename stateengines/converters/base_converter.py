#!/usr/bin/env python3
"""
Converter Base Class
====================
Converters translate between an entity and a sequence of State objects, two
representations of the same thing. The sequence of states is a path of
transitions through a state engine.

A converter is generally used to feed a Markov chain engine and to read its
output back. A trivial example converts a string to a sequence of
single-letter StringStates, and vice versa.

Converter configuration is an explicit record:

    ConverterConfig(length=1, lookback_length=0)

- length: number of non-overlapping characters per state (>= 1)
- lookback_length: number of preceding characters stored with each state as
  context (>= 0)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Sequence, Union

from stateengines.settings import get_setting
from stateengines.states import State


class InvalidInputError(ValueError):
    """Raised when a converter is given an entity it cannot represent."""


def _require_int(value: Any, name: str, minimum: int) -> int:
    # bool is an int subclass, but True is not a chunk width.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class ConverterConfig:
    """Validated converter configuration."""
    length: int = 1
    lookback_length: int = 0

    def __post_init__(self):
        _require_int(self.length, 'length', 1)
        _require_int(self.lookback_length, 'lookback_length', 0)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ConverterConfig':
        """Build a config from a mapping, rejecting unknown keys."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown converter option(s): {', '.join(unknown)}. "
                f"Recognized options: {', '.join(sorted(known))}"
            )
        return cls(**dict(data))

    @classmethod
    def from_settings(cls) -> 'ConverterConfig':
        """Build a config from the converter section of app.yaml."""
        return cls(
            length=get_setting('converter.length', 1),
            lookback_length=get_setting('converter.lookback_length', 0),
        )


ConfigLike = Union[ConverterConfig, Mapping[str, Any], None]


class Converter(ABC):
    """Base class for converters between entities and state sequences."""

    def __init__(self, config: ConfigLike = None):
        if isinstance(config, ConverterConfig):
            self.config = config
        else:
            self.config = ConverterConfig.from_dict(config)

    @abstractmethod
    def to_state_representation(self, entity: Any) -> List[State]:
        """
        Given an entity, convert it to a list of State objects representing
        a path of transitions through a state engine.
        """
        raise NotImplementedError(
            f"{type(self).__name__} must implement to_state_representation()"
        )

    @abstractmethod
    def from_state_representation(self, states: Sequence[State]) -> Any:
        """
        Given a sequence of State objects, representing a path of transitions
        through a state engine, convert it to the equivalent entity.
        """
        raise NotImplementedError(
            f"{type(self).__name__} must implement from_state_representation()"
        )

    @staticmethod
    def _require_string(entity: Any) -> str:
        if not isinstance(entity, str):
            raise InvalidInputError(
                f"Provided entity must be a string, got {type(entity).__name__}"
            )
        return entity

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self.config.length}, "
            f"lookback_length={self.config.lookback_length})"
        )
