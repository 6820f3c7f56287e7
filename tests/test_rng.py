"""
Unit tests for the seeded random source.
"""

from collections import Counter

import pytest

from sotdl_gen.exceptions import InvalidSeedError
from sotdl_gen.rng import SeededRandom, derive_seed, new_seed_hex


class TestDeriveSeed:
    """Tests for hex seed decoding."""

    def test_eight_bytes_big_endian(self):
        seed_hex, value = derive_seed("1575d911f49e59ee")
        assert seed_hex == "1575d911f49e59ee"
        assert value == 0x1575D911F49E59EE

    def test_short_seed_read_as_is(self):
        assert derive_seed("ff")[1] == 255
        assert derive_seed("0100")[1] == 256

    def test_long_seed_uses_first_eight_bytes(self):
        assert derive_seed("0000000000000001ffff")[1] == 1

    def test_empty_seed_generates_fresh(self):
        seed_hex, _ = derive_seed("")
        assert len(seed_hex) == 16
        int(seed_hex, 16)

    def test_none_seed_generates_fresh(self):
        seed_hex, _ = derive_seed(None)
        assert len(seed_hex) == 16

    @pytest.mark.parametrize("seed", ["xyz", "abc", "12 34 g", "   ", "15 75 d9", "0x1575", "ab\ncd"])
    def test_invalid_hex(self, seed):
        with pytest.raises(InvalidSeedError):
            derive_seed(seed)

    def test_new_seed_is_hex(self):
        assert len(new_seed_hex()) == 16
        bytes.fromhex(new_seed_hex())


class TestSeededRandom:
    """Tests for the draw primitives."""

    def test_seed_returns_canonical_hex(self):
        rng = SeededRandom()
        assert rng.seed("00ff") == "00ff"
        assert rng.numeric_seed == 255

    def test_same_seed_same_sequence(self):
        a = SeededRandom("1575d911f49e59ee")
        b = SeededRandom("1575d911f49e59ee")
        assert [a.uniform_int(0, 100) for _ in range(20)] == [b.uniform_int(0, 100) for _ in range(20)]

    def test_reseed_restarts_sequence(self):
        rng = SeededRandom("abcd")
        first = [rng.choice("abcdef") for _ in range(10)]
        rng.seed("abcd")
        assert [rng.choice("abcdef") for _ in range(10)] == first

    def test_uniform_int_half_open(self):
        rng = SeededRandom("01")
        draws = {rng.uniform_int(0, 11) for _ in range(2000)}
        assert draws == set(range(11))

    def test_uniform_int_empty_range(self):
        with pytest.raises(ValueError):
            SeededRandom("01").uniform_int(5, 5)

    def test_choice_empty(self):
        with pytest.raises(ValueError):
            SeededRandom("01").choice([])

    def test_weighted_choice_proportional(self):
        rng = SeededRandom("1575d911f49e59ee")
        counts = Counter(rng.weighted_choice(["a", "b", "c"], [1, 2, 7]) for _ in range(20000))
        assert counts["a"] / 20000 == pytest.approx(0.1, abs=0.02)
        assert counts["b"] / 20000 == pytest.approx(0.2, abs=0.02)
        assert counts["c"] / 20000 == pytest.approx(0.7, abs=0.02)

    def test_weighted_choice_skips_zero_weight(self):
        rng = SeededRandom("02")
        draws = {rng.weighted_choice(["a", "b", "c"], [0, 3, 0]) for _ in range(200)}
        assert draws == {"b"}

    @pytest.mark.parametrize("items,weights", [
        ([], []),
        (["a", "b"], [1]),
        (["a", "b"], [1, -1]),
        (["a", "b"], [0, 0]),
    ])
    def test_weighted_choice_rejects_bad_input(self, items, weights):
        with pytest.raises(ValueError):
            SeededRandom("01").weighted_choice(items, weights)

    def test_sample_without_replacement_distinct(self):
        rng = SeededRandom("03")
        sample = rng.sample_without_replacement(list(range(10)), 6)
        assert len(sample) == 6
        assert len(set(sample)) == 6

    def test_sample_whole_population(self):
        rng = SeededRandom("04")
        assert sorted(rng.sample_without_replacement("abcd", 4)) == ["a", "b", "c", "d"]

    def test_sample_too_many(self):
        with pytest.raises(ValueError):
            SeededRandom("05").sample_without_replacement([1, 2], 3)
