import random
from dataclasses import dataclass, field
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
# modular inverse of A (so we can step backward exactly)
INV_A = 1407677000  # because (A * INV_A) % M == 1

# Park–Miller outputs 1..M-1, i.e. M-1 distinct values.
SPAN = M - 1

def pm_next(state: int) -> int:
    return (state * A) % M

def pm_prev(state: int) -> int:
    return (state * INV_A) % M

def fold_seed(seed: int) -> int:
    """Map any int onto a valid Park–Miller state (1..M-1)."""
    return (seed % SPAN) + 1

def random_seed() -> int:
    # Fresh seed for the "randomize" action; drawn from the OS, not the stream.
    return random.SystemRandom().randrange(1, M)

@dataclass
class MazeRandom:
    """
    Per-request random source for the maze builder.

    Seeded: a Park–Miller stream carried in ``state``; identical call sequences
    give identical results. Unseeded: every draw goes to the process-wide
    ``random`` module.
    """
    seed: Optional[int] = None
    state: int = field(init=False, default=0)

    def __post_init__(self):
        if self.seed is not None:
            self.state = fold_seed(self.seed)

    @property
    def deterministic(self) -> bool:
        return self.seed is not None

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def uniform_int(self, lo: int, hi: int) -> int:
        """Uniform int in [lo, hi] inclusive."""
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        if not self.deterministic:
            return random.randint(lo, hi)
        n = hi - lo + 1
        # Reject the tail so every residue is equally likely.
        limit = SPAN - (SPAN % n)
        while True:
            v = self.next32() - 1   # 0..M-2
            if v < limit:
                return lo + (v % n)

    def pick(self, seq: Sequence[T]) -> Optional[T]:
        if not seq:
            return None
        return seq[self.uniform_int(0, len(seq) - 1)]
