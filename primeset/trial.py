# primeset/trial.py
# Trial-division engine: each new candidate is tested against the primes already found.

from __future__ import annotations
from itertools import islice
from typing import List

from .core import CacheView, PrimeSetBasics


class TrialDivision(PrimeSetBasics):
    """Prime cache grown by trial division. Seeded with [2, 3]."""

    def __init__(self):
        self._primes: List[int] = [2, 3]
        self._view = CacheView(self._primes)

    def list(self) -> CacheView:
        return self._view

    def expand(self) -> None:
        primes = self._primes
        cand = primes[-1] + 2
        while True:
            remainder = 0
            # candidates are odd, so 2 is never a divisor
            for p in islice(primes, 1, None):
                remainder = cand % p
                if remainder == 0 or p * p > cand:
                    break
            if remainder != 0:
                primes.append(cand)
                return
            cand += 2
