#!/usr/bin/env python3
"""Converter between strings and single-letter StringStates."""

from typing import List, Sequence

from stateengines.states import State, StringState
from .base_converter import Converter


class StringToLetterStatesConverter(Converter):
    """
    Converts a string to one StringState per character and back.

    "name" <=> "n", "a", "m", "e"

    The round trip is exact for every string, including the empty one.
    """

    def to_state_representation(self, entity) -> List[State]:
        text = self._require_string(entity)
        return [StringState(letter) for letter in text]

    def from_state_representation(self, states: Sequence[State]) -> str:
        return ''.join(state.representation for state in states)
