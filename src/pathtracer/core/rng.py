# core/rng.py
"""
Explicit random-number handles.

Nothing in the renderer draws from module-level random state. Callers pass a
`random.Random`-compatible generator into every operation that samples
(camera lens/time, material scattering, BVH split axis, Perlin tables).
Independent generators are derived from a numpy `SeedSequence` so that a
given seed always yields the same family of streams.
"""
import random
from typing import List, Optional

import numpy as np


def _seed_from(sequence: np.random.SeedSequence) -> int:
    # 128 bits of state from the sequence, folded into one Python int.
    words = sequence.generate_state(4, dtype=np.uint32)
    value = 0
    for word in words:
        value = (value << 32) | int(word)
    return value


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create a generator. With `seed=None` it is seeded from fresh OS entropy.
    """
    return random.Random(_seed_from(np.random.SeedSequence(seed)))


def spawn_rngs(seed: Optional[int], count: int) -> List[random.Random]:
    """
    Create `count` statistically independent generators from one seed.

    Generator `i` depends only on `(seed, i)`, never on how many siblings are
    spawned alongside it.
    """
    root = np.random.SeedSequence(seed)
    return [random.Random(_seed_from(child)) for child in root.spawn(count)]
