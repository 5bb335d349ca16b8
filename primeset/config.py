# primeset/config.py
# Environment-driven settings and the engine registry.

from __future__ import annotations
import os

from .sieve import Sieve
from .trial import TrialDivision

ENGINES = {"trial": TrialDivision, "sieve": Sieve}

ENGINE    = (os.getenv("PRIMESET_ENGINE", "sieve") or "sieve").strip().lower()
MAX_N     = int(os.getenv("PRIMESET_MAX_N", str(1 << 48)))
MAX_COUNT = int(os.getenv("PRIMESET_MAX_COUNT", "10000"))

def make_engine(name: str | None = None):
    """New engine by registry name; PRIMESET_ENGINE when name is None."""
    key = (name or ENGINE).strip().lower()
    try:
        cls = ENGINES[key]
    except KeyError:
        raise ValueError(f"unknown engine {key!r} (choose from {', '.join(sorted(ENGINES))})") from None
    return cls()
