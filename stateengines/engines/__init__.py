#!/usr/bin/env python3
"""
State Engines
=============
- StateEngine: registry and cursor shared by all engines
- MarkovChainStateEngine: learns weighted transitions from example paths
"""

from .base_engine import StateEngine
from .markov_chain import CompiledTransitions, MarkovChainStateEngine

__all__ = [
    'StateEngine',
    'MarkovChainStateEngine',
    'CompiledTransitions',
]
