import random
from typing import FrozenSet, List, Optional, Tuple


class DrawPool:
    """Numbers still in the drum plus the ordered history of drawn numbers.

    `remaining` and `drawn` always partition range(range_size).
    """

    def __init__(self, range_size: int = 100, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._remaining: List[int] = []
        self._drawn: List[int] = []
        self.reset(range_size)

    def reset(self, range_size: int = 100) -> None:
        self.range_size = range_size
        self._remaining = list(range(range_size))
        self._drawn = []

    def draw_random(self) -> Optional[int]:
        """Remove and return a uniformly chosen remaining number, or None when exhausted."""
        if not self._remaining:
            return None
        idx = self._rng.randrange(len(self._remaining))
        # swap-pop keeps removal O(1); order of _remaining carries no meaning
        last = len(self._remaining) - 1
        self._remaining[idx], self._remaining[last] = self._remaining[last], self._remaining[idx]
        number = self._remaining.pop()
        self._drawn.append(number)
        return number

    def remaining_count(self) -> int:
        return len(self._remaining)

    @property
    def remaining(self) -> FrozenSet[int]:
        return frozenset(self._remaining)

    def drawn_history(self) -> Tuple[int, ...]:
        return tuple(self._drawn)
