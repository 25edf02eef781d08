"""
Identity pool for mock logins.

Each login draws one display name uniformly at random from a fixed, ordered
pool. Nothing is tracked between draws, so repeats are expected.
"""

import random
from typing import Optional, Sequence, Tuple

IDENTITY_POOL: Tuple[str, ...] = (
    "Alice Johnson",
    "Bob Smith",
    "Charlie Brown",
    "Diana Prince",
    "Ethan Hunt",
    "Fiona Green",
    "George Wilson",
    "Hannah Lee",
    "Ivan Torres",
    "Julia Martinez",
)


class IdentityPool:
    """Fixed ordered collection of display names."""

    def __init__(
        self,
        names: Sequence[str] = IDENTITY_POOL,
        rng: Optional[random.Random] = None,
    ):
        if not names:
            raise ValueError("Identity pool must contain at least one name")
        self._names = tuple(names)
        self._rng = rng or random.Random()

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def pick_random(self) -> str:
        """Return one name, each with probability 1/len(pool)."""
        return self._rng.choice(self._names)
