# markov_generator/core/protocols.py
"""
Protocol interfaces shared by the chain and the generator.

Randomness is always passed in by the caller, so anything with the
two methods below works: random.Random, random.SystemRandom or a test stub.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable
from typing_extensions import TypedDict

T = TypeVar("T")


class ChainStats(TypedDict):
    """Summary of a trained chain, used for diagnostics."""
    contexts: int
    links: int
    entry_points: int
    depth: int


@runtime_checkable
class RandomSource(Protocol):
    """Minimal uniform random generator used for seeding and weighted sampling."""

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def randrange(self, stop: int) -> int:
        """Return a uniformly random integer in [0, stop)."""
        ...
