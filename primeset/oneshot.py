# primeset/oneshot.py
# Cache-free helpers: count upwards through odd numbers on every call.
# Faster than an engine for a single small query, slower for many.

from __future__ import annotations
from typing import Iterable, List, Optional

from .core import check_u64


def firstfac(x: int) -> int:
    """Smallest factor of x other than 1; x itself when x is prime."""
    x = check_u64(x)
    if x % 2 == 0:
        return 2
    n = 3
    while n * n <= x:
        if x % n == 0:
            return n
        n += 2
    return x

def factors(x: int) -> List[int]:
    """All prime factors of x, with repeats, ascending."""
    x = check_u64(x)
    if x <= 1:
        return []
    lst: List[int] = []
    curn = x
    while True:
        m = firstfac(curn)
        lst.append(m)
        if m == curn:
            break
        curn //= m
    return lst

def factors_uniq(x: int) -> List[int]:
    """Distinct prime factors of x, ascending."""
    x = check_u64(x)
    if x <= 1:
        return []
    lst: List[int] = []
    curn = x
    while True:
        m = firstfac(curn)
        lst.append(m)
        if curn == m:
            break
        while curn % m == 0:
            curn //= m
        if curn == 1:
            break
    return lst

def is_prime(n: int) -> bool:
    """Checks every odd number up to sqrt(n)."""
    n = check_u64(n)
    if n <= 1:
        return False
    return firstfac(n) == n

def phi(n: int, primes: Optional[Iterable[int]] = None) -> int:
    """
    Euler's totient of n. `primes` may supply the distinct prime factors of n
    when they are already known; otherwise they are found with factors_uniq.
    """
    n = check_u64(n)
    if n == 0:
        return 0
    if primes is None:
        primes = factors_uniq(n)
    result = n
    for p in primes:
        result -= result // p
    return result
