"""Seeded random source for reproducible character generation.

A single ``SeededRandom`` owns one ``random.Random`` instance. It is reseeded
from a hex string once per generation run; every draw made during that run
goes through it, so the same seed and options always yield the same character.
"""

from __future__ import annotations

import logging
import random
import re
import time
from typing import Sequence, TypeVar

from .exceptions import InvalidSeedError

logger = logging.getLogger("sotdl-gen")

T = TypeVar("T")

# Only the first 8 decoded bytes feed the generator
SEED_BYTES = 8

_HEX = re.compile(r"[0-9a-fA-F]+")


def new_seed_hex() -> str:
    """A fresh 16-digit hex seed taken from the wall clock."""
    return f"{time.time_ns() & 0xFFFFFFFFFFFFFFFF:016x}"


def derive_seed(seed_hex: str | None) -> tuple[str, int]:
    """Turn a hex seed into its canonical form and a 64-bit integer.

    An empty seed is replaced by a fresh one. The decoded bytes are read as an
    unsigned big-endian integer; inputs shorter than 8 bytes are read as-is.

    Raises:
        InvalidSeedError: If the string is not an even-length run of hex digits.
    """
    if not seed_hex:
        seed_hex = new_seed_hex()
    seed_hex = seed_hex.strip()
    if not _HEX.fullmatch(seed_hex):
        raise InvalidSeedError(seed_hex)
    try:
        raw = bytes.fromhex(seed_hex)
    except ValueError as e:
        raise InvalidSeedError(seed_hex) from e
    return seed_hex, int.from_bytes(raw[:SEED_BYTES], "big")


class SeededRandom:
    """Reproducible random draws keyed by a hex seed."""

    def __init__(self, seed_hex: str | None = None) -> None:
        self._random = random.Random()
        self.seed_hex = ""
        self.numeric_seed = 0
        if seed_hex:
            self.seed(seed_hex)

    def seed(self, seed_hex: str | None) -> str:
        """Reseed from a hex string (or a fresh one) and return the canonical hex."""
        self.seed_hex, self.numeric_seed = derive_seed(seed_hex)
        self._random.seed(self.numeric_seed)
        logger.info(f"Set new seed: {self.numeric_seed}")
        return self.seed_hex

    def uniform_int(self, low: int, high: int) -> int:
        """An integer in [low, high)."""
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return self._random.randrange(low, high)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self._random.randrange(len(items))]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick ``items[i]`` with probability proportional to ``weights[i]``.

        Weights need not sum to 1, but they must be non-negative and not all zero.
        """
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        if len(items) != len(weights):
            raise ValueError(f"Got {len(items)} items but {len(weights)} weights")
        if any(w < 0 for w in weights):
            raise ValueError("Weights must be non-negative")
        total = float(sum(weights))
        if total <= 0:
            raise ValueError("At least one weight must be positive")

        r = self._random.random() * total
        running = 0.0
        last = None
        for item, weight in zip(items, weights):
            if weight <= 0:
                continue
            running += weight
            last = item
            if r < running:
                return item
        # r can round up to total
        return last

    def sample_without_replacement(self, items: Sequence[T], n: int) -> list[T]:
        """``n`` distinct items taken from a random permutation of ``items``."""
        if n < 0 or n > len(items):
            raise ValueError(f"Cannot sample {n} items from {len(items)}")
        order = list(range(len(items)))
        self._random.shuffle(order)
        return [items[i] for i in order[:n]]
