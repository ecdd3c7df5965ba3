#!/usr/bin/env python3
"""Converter between texts and one StringState per word."""

from typing import List, Sequence

from stateengines.states import State, StringState
from .base_converter import Converter


class StringToWordStatesConverter(Converter):
    """
    Converts a text to one StringState per whitespace-separated word.

    "the cat sat" <=> "the", "cat", "sat"

    Runs of whitespace collapse to a single space on the way back.
    """

    def to_state_representation(self, entity) -> List[State]:
        text = self._require_string(entity)
        return [StringState(word) for word in text.split()]

    def from_state_representation(self, states: Sequence[State]) -> str:
        return ' '.join(state.representation for state in states)
