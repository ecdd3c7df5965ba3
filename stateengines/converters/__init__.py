#!/usr/bin/env python3
"""
Converters
==========
Mappings between entities and state sequences:
- Letter: one state per character
- String: fixed-width chunks with optional lookback context
- Word: one state per whitespace-separated word
"""

from .base_converter import (
    Converter,
    ConverterConfig,
    InvalidInputError,
)
from .letter_converter import StringToLetterStatesConverter
from .string_converter import StringToStringStatesConverter
from .word_converter import StringToWordStatesConverter

__all__ = [
    'Converter',
    'ConverterConfig',
    'InvalidInputError',
    'StringToLetterStatesConverter',
    'StringToStringStatesConverter',
    'StringToWordStatesConverter',
]
