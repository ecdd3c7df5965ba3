#!/usr/bin/env python3
"""
Markov Chain State Engine
=========================
Transition to a new state depends only on the current state; the new state is
picked at random from a weighted list. The weights (e.g. A->C versus A->B) are
learned by counting transitions in a set of example paths.

This is useful for exercises like creating random names that look similar to
a set of existing names, or nonsense texts that read somewhat like existing
texts. A Markov chain only produces raw material, though, and the output will
usually need filtering to be useful.

Lifecycle:
1. Training: add_defining_state_sequence() / add_defining_entity() fold
   example paths into the transition counts.
2. Compilation: the counts are turned into cumulative-weight buckets, lazily,
   the first time a transition is sampled after training.
3. Generation: weighted random walks from the undefined state back to the
   undefined state.

The engine is not thread-safe. Finish training before generating from more
than one place.

Usage:
    from stateengines import MarkovChainStateEngine, RandomSource

    engine = MarkovChainStateEngine(rng=RandomSource(seed=7))
    for name in ["Gabriel", "Raphael", "Uriel"]:
        engine.add_defining_entity(name)
    print(engine.generate_entity())
"""

import logging
from bisect import bisect_right
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from stateengines.converters import Converter, StringToLetterStatesConverter
from stateengines.entropy import get_rng
from stateengines.states import State
from .base_engine import StateEngine

logger = logging.getLogger(__name__)


def _check_max_length(value: Optional[int], name: str = 'max_sequence_length') -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer or None, got {value!r}")
    return value


@dataclass(frozen=True)
class CompiledTransitions:
    """
    Outgoing transitions of one state, laid out for weighted sampling.

    Each target owns the half-open interval
    [cumulative_weights[i], cumulative_weights[i + 1]) of [0, total_weight),
    so its width equals its learned count.
    """
    target_keys: Tuple[str, ...]
    cumulative_weights: Tuple[int, ...]
    total_weight: int

    @classmethod
    def from_counts(cls, counts: Dict[str, int]) -> 'CompiledTransitions':
        target_keys = []
        cumulative_weights = []
        total = 0
        for target_key, count in counts.items():
            target_keys.append(target_key)
            cumulative_weights.append(total)
            total += count
        return cls(tuple(target_keys), tuple(cumulative_weights), total)

    def select(self, pick: int) -> str:
        """Return the target key whose interval contains pick."""
        if not 0 <= pick < self.total_weight:
            raise ValueError(f"pick {pick} outside [0, {self.total_weight})")
        # Rightmost interval start <= pick.
        index = bisect_right(self.cumulative_weights, pick) - 1
        return self.target_keys[index]


class MarkovChainStateEngine(StateEngine):
    """A Markov chain state engine."""

    def __init__(self,
                 converter: Converter = None,
                 rng: Any = None,
                 max_sequence_length: Optional[int] = None):
        """
        Args:
            converter: Converter used by the entity-level methods
                (default: one state per letter)
            rng: Random source with a randrange(stop) method
                (default: the shared system-entropy source)
            max_sequence_length: Optional bound on generated sequence length
        """
        super().__init__()
        self.converter = converter if converter is not None else StringToLetterStatesConverter()
        self.rng = rng if rng is not None else get_rng()
        self.max_sequence_length = _check_max_length(max_sequence_length)

        # source key -> target key -> count
        self.transitions: Dict[str, Counter] = defaultdict(Counter)
        self._compiled: Dict[str, CompiledTransitions] = {}
        self._needs_compile = True

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def add_defining_state_sequence(self, states: Sequence[State]) -> None:
        """
        Add the transitions of a path through the engine's states.

        The path is prefixed with the undefined state (unless it already
        starts with it) and ends with a transition to the undefined state,
        so the first and last states of a path are learned with weights like
        any other transition.

        Args:
            states: A sequence of State objects
        """
        if not states:
            return

        path = list(states)
        if not path[0].is_undefined:
            path.insert(0, self.undefined_state)

        last = len(path) - 1
        for index, state in enumerate(path):
            self.add_allowed_state(state)
            next_state = path[index + 1] if index < last else self.undefined_state
            self.transitions[state.key()][next_state.key()] += 1

        self._needs_compile = True
        logger.debug(f"Learned path of {len(states)} states")

    # Shorter alias.
    add_path = add_defining_state_sequence

    def add_defining_entity(self, entity: Any) -> None:
        """Convert an entity with the engine's converter and learn its path."""
        self.add_defining_state_sequence(self.converter.to_state_representation(entity))

    def add_defining_entities(self, entities: Iterable[Any]) -> int:
        """Learn the paths of several entities. Returns how many were added."""
        count = 0
        for entity in entities:
            self.add_defining_entity(entity)
            count += 1
        return count

    # -------------------------------------------------------------------------
    # Compilation
    # -------------------------------------------------------------------------

    @property
    def needs_compile(self) -> bool:
        return self._needs_compile

    def compile(self) -> None:
        """Build the weighted selection buckets for every known state."""
        self._compiled = {
            state_key: CompiledTransitions.from_counts(counts)
            for state_key, counts in self.transitions.items()
        }
        self._needs_compile = False
        logger.debug(f"Compiled transitions for {len(self._compiled)} states")

    def ensure_compiled(self) -> None:
        if self._needs_compile:
            self.compile()

    def compiled_transitions(self, state: State) -> Optional[CompiledTransitions]:
        """The compiled buckets for transitions out of state, if any."""
        self.ensure_compiled()
        return self._compiled.get(state.key())

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def transition_weights(self, state: State) -> Dict[str, int]:
        """Learned counts of transitions out of state, by target key."""
        counts = self.transitions.get(state.key())
        return dict(counts) if counts else {}

    def transition_probabilities(self, state: State) -> Dict[str, float]:
        """Probability of each transition out of state, by target key."""
        weights = self.transition_weights(state)
        total = sum(weights.values())
        if not total:
            return {}
        return {key: count / total for key, count in weights.items()}

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def transition(self) -> State:
        self.ensure_compiled()

        selection = self._compiled.get(self.current_state.key())

        # No transitions from this state? Then transition to the undefined state.
        if selection is None or not selection.total_weight:
            self.current_state = self.undefined_state
            return self.current_state

        pick = self.rng.randrange(selection.total_weight)
        self.current_state = self.allowed_states[selection.select(pick)]
        return self.current_state

    def generate_state_sequence(self, max_length: Optional[int] = None) -> List[State]:
        """
        Walk from the undefined state until the engine returns to it.

        Args:
            max_length: Stop after this many states (default: the engine's
                max_sequence_length, which may be unbounded)

        Returns:
            The states visited, without the undefined states at either end
        """
        limit = _check_max_length(max_length, 'max_length')
        if limit is None:
            limit = self.max_sequence_length

        states = []
        self.set_current_state_to_undefined()
        state = self.transition()
        while not state.is_undefined:
            states.append(state)
            if limit is not None and len(states) >= limit:
                logger.debug(f"Sequence reached length limit {limit}, stopping walk")
                self.set_current_state_to_undefined()
                break
            state = self.transition()
        return states

    def generate_entity(self, max_length: Optional[int] = None) -> Any:
        """Generate a state sequence and convert it with the engine's converter."""
        return self.converter.from_state_representation(self.generate_state_sequence(max_length))

    generate_converted_state_sequence = generate_entity

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(states={self.state_count}, "
            f"sources={len(self.transitions)}, converter={self.converter!r})"
        )
