"""
Tests for Random Sources
========================
"""

import pytest

from stateengines.entropy import RandomSource, get_rng


class TestRandomSource:
    """Tests for RandomSource."""

    def test_seeded_is_reproducible(self):
        first = RandomSource(seed=3)
        second = RandomSource(seed=3)
        assert [first.randrange(100) for _ in range(20)] == [second.randrange(100) for _ in range(20)]

    def test_randrange_bounds(self):
        rng = RandomSource(seed=1)
        values = {rng.randrange(3) for _ in range(300)}
        assert values == {0, 1, 2}

    def test_unseeded_randrange_bounds(self):
        rng = RandomSource()
        assert not rng.seeded
        assert all(0 <= rng.randrange(5) < 5 for _ in range(100))

    @pytest.mark.parametrize("stop", [0, -4])
    def test_randrange_rejects_empty_range(self, stop):
        with pytest.raises(ValueError):
            RandomSource(seed=1).randrange(stop)

    def test_repr(self):
        assert repr(RandomSource(seed=9)) == "RandomSource(seed=9)"
        assert repr(RandomSource()) == "RandomSource()"


class TestGetRng:
    """Tests for get_rng()."""

    def test_shared_default(self):
        assert get_rng() is get_rng()

    def test_seeded_is_fresh(self):
        rng = get_rng(11)
        assert rng is not get_rng(11)
        assert rng.seeded
