from .core import (
    U64_MAX,
    CacheView,
    PrimeSetBasics,
    PrimeSetIter,
    check_u64,
    find_in_sorted,
)
from .oneshot import factors, factors_uniq, firstfac, is_prime, phi
from .sieve import Sieve
from .trial import TrialDivision
from .wheel import WHEEL30, Wheel30
from .config import ENGINES, make_engine

# the plain name stays bound to the trial-division engine
PrimeSet = TrialDivision

__all__ = [
    "U64_MAX", "CacheView", "PrimeSetBasics", "PrimeSetIter", "check_u64", "find_in_sorted",
    "factors", "factors_uniq", "firstfac", "is_prime", "phi",
    "Sieve", "TrialDivision", "PrimeSet", "WHEEL30", "Wheel30",
    "ENGINES", "make_engine",
]
