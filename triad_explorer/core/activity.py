"""
Simulated per-depth activity intensities.

Values are drawn once per depth when the explorer mounts and then stay fixed,
so stepping back to a depth repaints the same colors.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

import numpy as np

logger = logging.getLogger(__name__)


def leaf_count(depth: int) -> int:
    return 3 ** depth


class ActivityDataset(Mapping):
    """Read-only mapping of depth -> activity array of length 3**depth."""

    def __init__(self, data: Dict[int, np.ndarray]) -> None:
        self._data: Dict[int, np.ndarray] = {}
        for depth, values in data.items():
            arr = np.array(values, dtype=np.float64)
            arr.setflags(write=False)
            self._data[int(depth)] = arr

    def __getitem__(self, depth: int) -> np.ndarray:
        return self._data[depth]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def activity(self, depth: int, index: int) -> float:
        values = self._data.get(depth)
        if values is None or not 0 <= index < len(values):
            return 0.0
        return float(values[index])

    def accessor(self, depth: int):
        """Return ``index -> activity`` for one depth."""
        return lambda index: self.activity(depth, index)


class ActivityDataGenerator:
    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, depth: int) -> np.ndarray:
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        return self._rng.random(leaf_count(depth))

    def generate_all(self, min_depth: int, max_depth: int) -> ActivityDataset:
        data = {depth: self.generate(depth) for depth in range(min_depth, max_depth + 1)}
        logger.debug(
            "Generated activity for depths %d..%d (%d values)",
            min_depth,
            max_depth,
            sum(len(v) for v in data.values()),
        )
        return ActivityDataset(data)
