#!/usr/bin/env python3
"""
State Engines - Markov Chain Entity Builder
===========================================

Builds entities such as names by learning first-order transition statistics
from examples and replaying them stochastically.

Quick Start
-----------
    import stateengines

    engine = stateengines.markov_chain_state_engine()
    for name in ["Gabriel", "Raphael", "Uriel"]:
        engine.add_defining_entity(name)

    # A new name built from the learned letter transitions
    name = engine.generate_entity()

    # Or work with states directly
    engine.add_defining_state_sequence([
        stateengines.string_state("A"),
        stateengines.string_state("b"),
    ])

Modules
-------
    stateengines.states     - State, StringState, UndefinedState
    stateengines.engines    - StateEngine, MarkovChainStateEngine
    stateengines.converters - Entity <-> state sequence converters
    stateengines.generator  - MarkovNameGenerator (filtering, batches)
    stateengines.corpus     - Built-in training corpora
    stateengines.settings   - app.yaml settings

CLI Usage
---------
    python -m stateengines generate -n 10 --corpus angels --lookback 1
    python -m stateengines transitions a --corpus angels
    python -m stateengines corpora
"""

__version__ = "0.1.0"

from typing import Any, Optional

from . import converters
from . import engines
from . import states

from .states import State, StringState, UndefinedState
from .entropy import RandomSource, get_rng
from .converters import (
    Converter,
    ConverterConfig,
    InvalidInputError,
    StringToLetterStatesConverter,
    StringToStringStatesConverter,
    StringToWordStatesConverter,
)
from .engines import (
    StateEngine,
    MarkovChainStateEngine,
    CompiledTransitions,
)
from .generator import MarkovNameGenerator
from .corpus import TRAINING_CORPUS, get_corpus, list_corpora, load_corpus_file
from .settings import get_setting


# =============================================================================
# Convenience Functions
# =============================================================================

def markov_chain_state_engine(converter: Converter = None,
                              rng: Any = None,
                              max_sequence_length: Optional[int] = None) -> MarkovChainStateEngine:
    """A new Markov chain based StateEngine instance."""
    return MarkovChainStateEngine(
        converter=converter,
        rng=rng,
        max_sequence_length=max_sequence_length,
    )


def string_state(representation: str) -> StringState:
    """A new State represented by a string."""
    return StringState(representation)


__all__ = [
    '__version__',
    # Factories
    'markov_chain_state_engine',
    'string_state',
    # States
    'State',
    'StringState',
    'UndefinedState',
    # Engines
    'StateEngine',
    'MarkovChainStateEngine',
    'CompiledTransitions',
    # Converters
    'Converter',
    'ConverterConfig',
    'InvalidInputError',
    'StringToLetterStatesConverter',
    'StringToStringStatesConverter',
    'StringToWordStatesConverter',
    # Randomness
    'RandomSource',
    'get_rng',
    # Generation helpers
    'MarkovNameGenerator',
    'TRAINING_CORPUS',
    'get_corpus',
    'list_corpora',
    'load_corpus_file',
    'get_setting',
]
