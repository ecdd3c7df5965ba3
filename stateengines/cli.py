#!/usr/bin/env python3
"""
State Engines CLI
=================
Command-line interface for training a Markov chain on a corpus and drawing
new entities from it.

Usage:
    stateengines generate -n 10 --corpus angels --lookback 1
    stateengines generate -n 5 --file names.txt --length 2 --json
    stateengines transitions a --corpus angels
    stateengines corpora
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stateengines import __version__
from stateengines.converters import ConverterConfig, StringToStringStatesConverter
from stateengines.corpus import get_corpus, list_corpora, load_corpus_file
from stateengines.entropy import get_rng
from stateengines.generator import MarkovNameGenerator
from stateengines.settings import get_setting
from stateengines.states import StringState

logger = logging.getLogger(__name__)

END_LABEL = '<end>'
START_LABEL = '<start>'


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console()
        self.err_console = Console(stderr=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def raw(self, text: str):
        """Unstyled output, printed even in quiet mode (machine-readable)."""
        print(text)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", style="red", markup=False, highlight=False, soft_wrap=True)

    def table(self, title: str, headers: list, rows: list):
        """Print a rich table."""
        if self.quiet:
            return
        table = Table(title=escape(title))
        for header in headers:
            table.add_column(header)
        for row in rows:
            table.add_row(*(escape(str(c)) for c in row))
        self.console.print(table)


def configure_logging(verbose: bool = False):
    if verbose:
        level = logging.DEBUG
    else:
        level_name = str(get_setting('logging.level', 'WARNING')).upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
    )


def load_training_names(args) -> list:
    """Corpus from --file, else the named built-in corpus."""
    if args.file:
        return load_corpus_file(args.file)
    return get_corpus(args.corpus or get_setting('generator.corpus', 'angels'))


def build_converter(args) -> StringToStringStatesConverter:
    defaults = ConverterConfig.from_settings()
    config = ConverterConfig(
        length=args.length if args.length is not None else defaults.length,
        lookback_length=args.lookback if args.lookback is not None else defaults.lookback_length,
    )
    return StringToStringStatesConverter(config)


def build_generator(args) -> MarkovNameGenerator:
    names = load_training_names(args)
    if not names:
        raise ValueError("Training corpus is empty")
    return MarkovNameGenerator(
        names,
        converter=build_converter(args),
        rng=get_rng(args.seed),
        exclude_training=not getattr(args, 'include_training', False),
    )


def add_training_arguments(p: argparse.ArgumentParser):
    p.add_argument('--corpus', '-c', help='Built-in corpus name (default: from app.yaml)')
    p.add_argument('--file', '-f', help='Corpus file, one entry per line')
    p.add_argument('--length', '-l', type=int, help='Characters per state')
    p.add_argument('--lookback', '-b', type=int, help='Lookback characters per state')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    count = args.count if args.count is not None else get_setting('generator.count', 10)
    if count < 1:
        raise ValueError("Count must be at least 1")

    generator = build_generator(args)
    names = generator.generate_batch(
        count,
        min_length=args.min_length,
        max_length=args.max_length,
    )

    if args.json:
        out.raw(json.dumps(names, indent=2))
        return 0

    out.table(
        f"Generated {len(names)} of {count} names",
        ['#', 'Name'],
        [(i, name) for i, name in enumerate(names, 1)],
    )
    return 0


def cmd_transitions(args, out: Output):
    """Show the learned transitions out of one state."""
    generator = build_generator(args)
    engine = generator.engine

    if args.state:
        state = StringState(args.state)
    else:
        state = engine.undefined_state

    if not engine.is_allowed_state(state):
        raise ValueError(f"Unknown state '{args.state}'")

    weights = engine.transition_weights(state)
    probabilities = engine.transition_probabilities(state)
    ordered = sorted(weights.items(), key=lambda item: (-item[1], item[0]))

    if args.json:
        out.raw(json.dumps(
            {key: {'count': count, 'probability': probabilities[key]} for key, count in ordered},
            indent=2,
        ))
        return 0

    out.table(
        f"Transitions from {args.state or START_LABEL}",
        ['Target', 'Count', 'Probability'],
        [(key or END_LABEL, count, f"{probabilities[key]:.3f}") for key, count in ordered],
    )
    return 0


def cmd_corpora(args, out: Output):
    """List built-in corpora."""
    out.table(
        "Built-in corpora",
        ['Corpus', 'Entries'],
        sorted(list_corpora().items()),
    )
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='stateengines',
        description='State Engines - Markov chain name builder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --corpus angels --lookback 1
  %(prog)s generate -n 5 --file names.txt --length 2 --json
  %(prog)s transitions a --corpus celestial
  %(prog)s corpora
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, help='Number of names (default: from app.yaml)')
    p.add_argument('--min-length', type=int, help='Minimum name length')
    p.add_argument('--max-length', type=int, help='Maximum name length')
    p.add_argument('--include-training', action='store_true',
                   help='Allow names that repeat a training entry')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    add_training_arguments(p)

    # --- transitions ---
    p = subparsers.add_parser('transitions', aliases=['t'], help='Show learned transitions')
    p.add_argument('state', nargs='?', default='',
                   help='State key (omit for the start of a sequence)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    add_training_arguments(p)

    # --- corpora ---
    subparsers.add_parser('corpora', help='List built-in corpora')

    # Parse
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        't': 'transitions',
    }
    command = cmd_map.get(args.command, args.command)

    # Output handler
    out = Output(quiet=args.quiet)

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'transitions': cmd_transitions,
        'corpora': cmd_corpora,
    }

    handler = commands.get(command)
    if handler:
        try:
            configure_logging(args.verbose)
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (ValueError, OSError) as e:
            out.error(str(e))
            if args.verbose:
                logger.exception("Command failed")
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
