#!/usr/bin/env python3
"""
Substring Converter
===================
Converts between a string and a list of StringStates, each of which is a
substring of the input. The substrings can overlap to some degree, e.g.
for single-letter substrings with one letter of lookback:

    "name" <=> "n", "na", "am", "me"

Or for single-letter substrings with no lookback:

    "name" <=> "n", "a", "m", "e"

The lookback characters only give context to a state during training: two
chunks that read the same are different states when the characters before
them differ. They never appear twice in the reconstructed string.
"""

from typing import List, Sequence

from stateengines.states import State, StringState
from .base_converter import Converter


class StringToStringStatesConverter(Converter):
    """
    Converter for fixed-width chunks with an optional lookback prefix.

    Config:
        length: number of non-overlapping characters in a substring
        lookback_length: number of prior characters to include in each state
    """

    def to_state_representation(self, entity) -> List[State]:
        text = self._require_string(entity)
        length = self.config.length
        lookback = self.config.lookback_length

        # At the start of the string there is less (or nothing) to look back
        # to, so those substrings are shorter.
        states = []
        for index in range(0, len(text), length):
            start = max(0, index - lookback)
            states.append(StringState(text[start:index + length]))
        return states

    def from_state_representation(self, states: Sequence[State]) -> str:
        length = self.config.length
        lookback = self.config.lookback_length

        parts = []
        emitted = 0
        for state in states:
            representation = state.representation
            # The prefix can be no longer than what precedes the chunk.
            chunk = representation[min(lookback, emitted):]
            if len(chunk) > length:
                chunk = chunk[-length:]
            parts.append(chunk)
            emitted += len(chunk)
        return ''.join(parts)
