# primeset/core.py
# Shared contract for prime-caching engines, and everything written once on top of it:
# - PrimeSetIter: lazy iterator over an engine's cache, expanding on demand
# - find_in_sorted: lower-bound search over the cached primes
# - find / is_prime / get / prime_factors for every engine

from __future__ import annotations
import operator
from abc import ABC, abstractmethod
from bisect import bisect_left
from collections.abc import Sequence
from typing import List, Optional, Tuple

U64_MAX = 0xFFFFFFFFFFFFFFFF

def check_u64(n: int) -> int:
    """Return n as an int, or raise ValueError when it is outside 0..2^64-1."""
    n = operator.index(n)
    if n < 0 or n > U64_MAX:
        raise ValueError("n must be a 64-bit unsigned integer (0..2^64-1)")
    return n

# ---------- Cache view ----------

class CacheView(Sequence):
    """Read-only window onto an engine's prime list. Grows as the engine expands."""

    __slots__ = ("_lst",)

    def __init__(self, lst: List[int]):
        self._lst = lst

    def __getitem__(self, index):
        return self._lst[index]

    def __len__(self) -> int:
        return len(self._lst)

    def __eq__(self, other) -> bool:
        if isinstance(other, CacheView):
            other = other._lst
        if isinstance(other, (list, tuple)):
            return len(self._lst) == len(other) and all(a == b for a, b in zip(self._lst, other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"CacheView({self._lst!r})"

# ---------- Lower-bound search ----------

def find_in_sorted(lst: Sequence[int], n: int) -> Optional[Tuple[int, int]]:
    """
    Smallest entry >= n in an ascending list, as (index, value).
    None when n is past the last entry (or the list is empty).
    """
    if not lst or n > lst[-1]:
        return None
    ix = bisect_left(lst, n)
    return ix, lst[ix]

# ---------- Iterator ----------

class PrimeSetIter:
    """
    Walks an engine's primes starting at position `n`.
    With expand=True the engine is grown whenever the cursor reaches the end of the
    cache, so the iterator never stops; with expand=False it stops at the cached end.

    Only one iterator should drive a given engine at a time, and the engine must not
    be shared across threads without an outside lock.
    """

    __slots__ = ("pset", "n", "expand")

    def __init__(self, pset: "PrimeSetBasics", n: int = 0, expand: bool = True):
        self.pset = pset
        self.n = n
        self.expand = expand

    def __iter__(self):
        return self

    def __next__(self) -> int:
        while self.n >= len(self.pset.list()):
            if not self.expand:
                raise StopIteration
            self.pset.expand()
        p = self.pset.list()[self.n]
        self.n += 1
        return p

# ---------- Engine contract ----------

class PrimeSetBasics(ABC):
    """
    A growing, gap-free, ascending cache of primes.

    Engines only provide expand() and list(); the rest is built from those two.
    """

    @abstractmethod
    def expand(self) -> None:
        """Find one more prime and append it to the cache."""

    @abstractmethod
    def list(self) -> Sequence[int]:
        """The primes found so far, ascending, read-only."""

    def __len__(self) -> int:
        return len(self.list())

    def __getitem__(self, index: int) -> int:
        return self.list()[index]

    def __iter__(self):
        return self.iter_vec()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cached={len(self)}, largest={self.largest()})"

    def is_empty(self) -> bool:
        return len(self.list()) == 0

    def largest(self) -> int:
        lst = self.list()
        return lst[-1] if lst else 0

    # --- iterators ---

    def iter(self) -> PrimeSetIter:
        """All primes from 2 onwards. Replays the cache, then keeps expanding."""
        return PrimeSetIter(self, 0, True)

    def generator(self) -> PrimeSetIter:
        """Only primes not yet found."""
        return PrimeSetIter(self, len(self), True)

    def iter_vec(self) -> PrimeSetIter:
        """Just the primes already cached; never expands."""
        return PrimeSetIter(self, 0, False)

    # --- search ---

    def find_in_cache(self, n: int) -> Optional[Tuple[int, int]]:
        """Smallest cached prime >= n as (index, prime), or None if n is beyond the cache."""
        return find_in_sorted(self.list(), n)

    def find(self, n: int) -> Tuple[int, int]:
        """
        Smallest prime >= n as (index, prime), expanding until it is cached.
        If n is prime the result is (index_of_n, n).
        """
        n = check_u64(n)
        while n > self.largest():
            self.expand()
        return self.find_in_cache(n)

    def get(self, index: int) -> int:
        """The index-th prime (0-indexed), expanding as far as needed."""
        index = operator.index(index)
        if index < 0:
            raise IndexError("prime index out of range")
        while len(self) <= index:
            self.expand()
        return self.list()[index]

    # --- arithmetic ---

    def is_prime(self, n: int) -> bool:
        """Trial division by cached primes up to sqrt(n), growing the cache when short."""
        n = check_u64(n)
        if n <= 1:
            return False
        if n == 2:
            return True
        for m in self.iter():
            if n % m == 0:
                return False
            if m * m > n:
                return True
        raise AssertionError("prime iterator ended")

    def prime_factors(self, n: int) -> List[int]:
        """Prime factors of n with repeats, ascending. [] for 0 and 1."""
        n = check_u64(n)
        if n <= 1:
            return []
        curn = n
        out: List[int] = []
        for p in self.iter():
            while curn % p == 0:
                out.append(p)
                curn //= p
                if curn == 1:
                    return out
            if p * p > curn:
                out.append(curn)
                return out
        raise AssertionError("prime iterator ended")
