from __future__ import annotations
"""Random sampling helpers driven by an explicit numpy Generator.

Sampling from an empty collection is not fatal: an error is logged and a
default (``None`` or an empty list) is returned so world generation can
carry on.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, TypeVar
import logging

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Weighted(Generic[T]):
    """An item paired with its relative selection weight."""

    weight: float
    obj: T


def rate(rng: np.random.Generator, p: float) -> bool:
    """Return True with probability ``p``."""
    return float(rng.random()) < p


def sample(rng: np.random.Generator, items: Sequence[T]) -> Optional[T]:
    """Pick one element uniformly, or None if ``items`` is empty."""
    items = list(items)
    if not items:
        logger.error("Trying to sample an empty list")
        return None
    return items[int(rng.integers(0, len(items)))]


def sample_n(rng: np.random.Generator, items: Sequence[T], n: int) -> List[T]:
    """Pick up to ``n`` distinct elements without replacement."""
    pool = list(items)
    out: List[T] = []
    while len(out) < n and pool:
        out.append(pool.pop(int(rng.integers(0, len(pool)))))
    return out


def shuffle(rng: np.random.Generator, items: Sequence[T]) -> List[T]:
    """Return a shuffled copy of ``items``."""
    return sample_n(rng, items, len(items))


def _pick_weighted(rng: np.random.Generator, pool: List[Weighted[Any]]) -> int:
    total = sum(w.weight for w in pool if w.weight > 0)
    choice = float(rng.uniform(0.0, total)) if total > 0 else 0.0
    acc = 0.0
    last = len(pool) - 1
    for i, w in enumerate(pool):
        if w.weight <= 0:
            continue
        acc += w.weight
        last = i
        if choice <= acc:
            return i
    return last


def weighted_sample_n(rng: np.random.Generator, items: Sequence[Weighted[T]], n: int) -> List[T]:
    """Pick up to ``n`` distinct objects, each draw proportional to weight."""
    pool = list(items)
    if not pool:
        logger.error("Trying to sample an empty list")
        return []
    out: List[T] = []
    while len(out) < n and pool:
        out.append(pool.pop(_pick_weighted(rng, pool)).obj)
    return out


def weighted_sample(rng: np.random.Generator, items: Sequence[Weighted[T]]) -> Optional[T]:
    picked = weighted_sample_n(rng, items, 1)
    return picked[0] if picked else None
