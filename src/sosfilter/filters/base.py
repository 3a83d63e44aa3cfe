"""Shared streaming filter interface and serial chaining."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Mapping, Sequence

import numpy as np


class BaseFilter(ABC):
    """Common interface for stateful, sample-by-sample filters.

    ``process`` accepts either a single sample or a sequence. Both forms go
    through ``process_sample`` so that filtering a batch is identical to
    filtering its elements one call at a time.
    """

    name: str = "filter"

    @abstractmethod
    def process_sample(self, sample: float) -> float:
        """Filter one sample, updating internal state."""

    @abstractmethod
    def reset(self) -> None:
        """Clear internal state."""

    def process(self, data: float | Sequence[float] | np.ndarray) -> float | np.ndarray:
        if np.ndim(data) == 0:
            return self.process_sample(float(data))
        arr = np.asarray(data, dtype=float)
        out = np.empty_like(arr)
        for idx, sample in enumerate(arr):
            out[idx] = self.process_sample(float(sample))
        return out

    def describe(self) -> Mapping[str, object]:
        return {"name": self.name}


class FilterChain(BaseFilter):
    """Serial composition: the output of stage i feeds stage i + 1."""

    name = "chain"

    def __init__(self, stages: Iterable[BaseFilter] = ()) -> None:
        self._stages: list[BaseFilter] = list(stages)

    @property
    def stages(self) -> list[BaseFilter]:
        return list(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def process_sample(self, sample: float) -> float:
        for stage in self._stages:
            sample = stage.process_sample(sample)
        return sample

    def reset(self) -> None:
        for stage in self._stages:
            stage.reset()

    def describe(self) -> dict[str, object]:
        return {"name": self.name, "stages": [stage.describe() for stage in self._stages]}
