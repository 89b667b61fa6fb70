import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SPAN = M - 1    # states run 1..M-1


class RandomSource(Protocol):
    """What the carving algorithms need. random.Random already fits."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def getrandbits(self, k: int) -> int: ...


def pm_next(state: int) -> int:
    return (state * A) % M

@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator. Small, exact and reproducible
    from a seed, which is what golden-output tests need.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        # 0 is a fixed point of the recurrence; map it (and multiples of M) to 1.
        s = seed % M
        return cls(s if s else 1)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Uniform draw in 1..n inclusive, for any n up to SPAN."""
        if not (1 <= n <= SPAN):
            raise ValueError(f"n must be 1..{SPAN}, got {n}")
        # Reject the top SPAN % n values so every residue is equally likely.
        limit = SPAN - SPAN % n
        while True:
            v = self.next32() - 1
            if v < limit:
                return v % n + 1

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.bounded(len(seq)) - 1]

    def getrandbits(self, k: int) -> int:
        # States are 31 bits wide; hand out the top k.
        if not (1 <= k <= 31):
            raise ValueError("k must be 1..31")
        return self.next32() >> (31 - k)

    def random_bool(self) -> bool:
        return self.getrandbits(1) == 1


def make_rng(seed: Optional[int] = None) -> RandomSource:
    """Seeded PMRandom for repeatable mazes, otherwise a fresh random.Random()."""
    if seed is None:
        return random.Random()
    return PMRandom.from_seed(seed)
