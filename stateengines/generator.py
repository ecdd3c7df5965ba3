#!/usr/bin/env python3
"""
Markov Name Generator
=====================
Trains a MarkovChainStateEngine on a corpus of names and draws new ones.

The engine itself guarantees nothing about its output beyond following the
learned transitions. This layer adds what a caller usually wants on top:
- length bounds
- rejection of names that merely repeat a training entry
- batches of unique names

Usage:
    from stateengines import MarkovNameGenerator, get_corpus
    from stateengines.converters import ConverterConfig, StringToStringStatesConverter

    converter = StringToStringStatesConverter(ConverterConfig(length=1, lookback_length=1))
    generator = MarkovNameGenerator(get_corpus('angels'), converter=converter)
    names = generator.generate_batch(10)
"""

import logging
from typing import Any, Iterable, List, Optional

from stateengines.converters import Converter, ConverterConfig, StringToStringStatesConverter
from stateengines.engines import MarkovChainStateEngine
from stateengines.settings import get_setting

logger = logging.getLogger(__name__)

# Default marker: read engine.max_sequence_length from app.yaml
FROM_SETTINGS = object()


class MarkovNameGenerator:
    """Generates names from a Markov chain trained on a corpus."""

    def __init__(self,
                 corpus: Iterable[str],
                 converter: Converter = None,
                 rng: Any = None,
                 max_sequence_length: Any = FROM_SETTINGS,
                 exclude_training: Optional[bool] = None):
        """
        Args:
            corpus: Training names
            converter: Converter for names (default: built from app.yaml)
            rng: Random source with a randrange(stop) method
            max_sequence_length: Bound on walk length, None for unbounded
                (default: from app.yaml)
            exclude_training: Reject names found in the corpus (default: from app.yaml)
        """
        if converter is None:
            converter = StringToStringStatesConverter(ConverterConfig.from_settings())
        if max_sequence_length is FROM_SETTINGS:
            max_sequence_length = get_setting('engine.max_sequence_length')
        if exclude_training is None:
            exclude_training = get_setting('generator.exclude_training', True)

        self.engine = MarkovChainStateEngine(
            converter=converter,
            rng=rng,
            max_sequence_length=max_sequence_length,
        )
        self.exclude_training = bool(exclude_training)

        names = [name.strip() for name in corpus if name and name.strip()]
        self.engine.add_defining_entities(names)
        self.corpus_set = {name.lower() for name in names}
        logger.debug(f"Trained on {len(names)} names, {self.engine.state_count} states")

    def _is_not_in_corpus(self, name: str) -> bool:
        """Check that we didn't just recreate a training example"""
        return name.lower() not in self.corpus_set

    def generate(self,
                 min_length: Optional[int] = None,
                 max_length: Optional[int] = None) -> Optional[str]:
        """
        Generate a single name.

        Args:
            min_length: Minimum name length (default: from app.yaml)
            max_length: Maximum name length (default: from app.yaml)

        Returns:
            Generated name or None if this walk was rejected
        """
        if min_length is None:
            min_length = get_setting('generator.min_length', 1)
        if max_length is None:
            max_length = get_setting('generator.max_length')

        name = self.engine.generate_entity()

        if not name or len(name) < min_length:
            logger.debug(f"Rejected {name!r}: shorter than {min_length}")
            return None
        if max_length is not None and len(name) > max_length:
            logger.debug(f"Rejected {name!r}: longer than {max_length}")
            return None
        if self.exclude_training and not self._is_not_in_corpus(name):
            logger.debug(f"Rejected {name!r}: copy of a training name")
            return None
        return name

    def generate_batch(self,
                       count: int,
                       min_length: Optional[int] = None,
                       max_length: Optional[int] = None,
                       max_attempts: Optional[int] = None) -> List[str]:
        """
        Generate multiple unique names.

        Args:
            count: Number of names to generate
            min_length: Minimum name length
            max_length: Maximum name length
            max_attempts: Give up after this many walks
                (default: count * generator.max_attempts_factor)

        Returns:
            Up to count unique names, in generation order
        """
        if max_attempts is None:
            max_attempts = count * get_setting('generator.max_attempts_factor', 20)

        results = []
        seen = set()
        attempts = 0

        while len(results) < count and attempts < max_attempts:
            attempts += 1
            name = self.generate(min_length=min_length, max_length=max_length)
            if name and name.lower() not in seen:
                seen.add(name.lower())
                results.append(name)

        if len(results) < count:
            logger.debug(f"Only {len(results)}/{count} names after {attempts} attempts")
        return results


__all__ = ['MarkovNameGenerator']
