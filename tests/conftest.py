"""Shared fixtures for the state-engines tests."""

import random
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom:
    """Random source stub returning queued picks, then a default."""

    def __init__(self, picks=(), default=0):
        self.picks = list(picks)
        self.default = default
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        if self.picks:
            return self.picks.pop(0)
        return self.default


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against the packaged app.yaml only."""
    monkeypatch.delenv("STATEENGINES_CONFIG", raising=False)
