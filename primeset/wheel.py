# primeset/wheel.py
# Mod-30 wheel: walks the integers coprime to 2, 3 and 5.

from __future__ import annotations

# residues coprime to 30, ascending
WHEEL30 = (1, 7, 11, 13, 17, 19, 23, 29)


class Wheel30:
    """Ascending stream of integers coprime to 30, starting at base + WHEEL30[ix]."""

    def __init__(self, base: int = 0, ix: int = 0):
        if base % 30:
            raise ValueError("base must be a multiple of 30")
        self.base = base
        self.ix = ix % len(WHEEL30)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        value = self.base + WHEEL30[self.ix]
        self.ix += 1
        if self.ix == len(WHEEL30):
            self.ix = 0
            self.base += 30
        return value

    def __repr__(self) -> str:
        return f"Wheel30(base={self.base}, ix={self.ix})"
