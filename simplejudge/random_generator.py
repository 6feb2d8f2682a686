"""Random index picker that avoids recently chosen indices."""

from __future__ import annotations

import random
from collections import OrderedDict


class RandomGenerator:
    """Draws indices, redrawing any that are among the last ``capacity``."""

    def __init__(self, capacity: int, rng: random.Random | None = None) -> None:
        self.capacity = capacity
        self._rng = rng if rng is not None else random.Random()
        self._recent: OrderedDict[int, None] = OrderedDict()

    def next(self, n: int) -> int:
        """Return an index in ``range(n)`` not recently returned if possible."""
        if n <= 0:
            raise ValueError("No elements to choose from")
        idx = self._rng.randrange(n)
        while idx in self._recent and len(self._recent) < n:
            idx = self._rng.randrange(n)
        self._touch(idx)
        return idx

    def _touch(self, idx: int) -> None:
        self._recent.pop(idx, None)
        self._recent[idx] = None
        if len(self._recent) > self.capacity:
            self._recent.popitem(last=False)