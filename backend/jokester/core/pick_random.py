"""Random Joke Selection — uniform offset into the joke collection.

Invariants:
    - pick_offset(count) returns an int in [0, count) for count > 0
    - Returns None when there is nothing to pick from (count <= 0)
    - Randomness source is injected; same seed -> same offset

Design Decisions:
    - Count-then-skip: the collection may shrink between count and fetch; the
      caller treats an empty fetch as "no joke", there is no snapshot
"""

import random


def pick_offset(count: int, rng: random.Random | None = None) -> int | None:
    if count <= 0:
        return None
    return (rng or random).randrange(count)
