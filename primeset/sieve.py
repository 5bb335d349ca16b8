# primeset/sieve.py
# Incremental sieve of Eratosthenes.
# Candidates come off a mod-30 wheel; each found prime p >= 7 keeps one pending
# (next odd multiple, p) entry on a min-heap, advanced lazily by 2p when passed.

from __future__ import annotations
import heapq
from typing import List, Tuple

from .core import CacheView, PrimeSetBasics
from .wheel import Wheel30


class Sieve(PrimeSetBasics):
    """Prime cache grown by an incremental wheel sieve. Seeded with [2, 3, 5]."""

    def __init__(self):
        self._primes: List[int] = [2, 3, 5]
        self._view = CacheView(self._primes)
        self._wheel = Wheel30(0, 1)  # first candidate is 7
        self._pending: List[Tuple[int, int]] = []

    def list(self) -> CacheView:
        return self._view

    def expand(self) -> None:
        pending = self._pending
        cand = next(self._wheel)
        while pending:
            composite, p = pending[0]
            if composite > cand:
                break
            heapq.heapreplace(pending, (composite + 2 * p, p))
            if composite == cand:
                cand = next(self._wheel)
        # smaller multiples of cand are already crossed off by smaller primes
        heapq.heappush(pending, (cand * cand, cand))
        self._primes.append(cand)
