# Copyright Rand Arete @ Ananke 2025
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Shrinkables for bounded integers and sampled values."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from ..errors import ConfigurationError
from .distance import ShrinkingDistance
from .shrinkable import Shrinkable


def default_shrink_target(min_value: int, max_value: int) -> int:
    """Zero if in range, otherwise the bound nearest to zero."""
    if min_value <= 0 <= max_value:
        return 0
    return min_value if min_value > 0 else max_value


def shrink_values_towards(value: int, target: int) -> Iterator[int]:
    """Yield values between ``target`` and ``value``, closest to target first.

    The step towards the target halves each time, so the last candidate is
    always the direct neighbour of ``value``:

        >>> list(shrink_values_towards(50, 1))
        [1, 26, 38, 44, 47, 49]
    """
    difference = value - target
    sign = 1 if difference > 0 else -1
    delta = abs(difference)
    while delta > 0:
        yield value - sign * delta
        delta //= 2


class ShrinkableInteger(Shrinkable[int]):
    """An integer in ``[min_value, max_value]`` shrinking towards a target.

    Attributes:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        target: Value shrinking converges to
    """

    def __init__(self, value: int, min_value: int, max_value: int, target: Optional[int] = None):
        if target is None:
            target = default_shrink_target(min_value, max_value)
        if not min_value <= target <= max_value:
            raise ConfigurationError(
                f"Shrink target [{target}] outside of range [{min_value}, {max_value}]"
            )
        self._value = value
        self.min_value = min_value
        self.max_value = max_value
        self.target = target

    @property
    def value(self) -> int:
        return self._value

    def distance(self) -> ShrinkingDistance:
        return ShrinkingDistance.of(abs(self._value - self.target))

    def shrink_candidates(self) -> Iterator[Shrinkable[int]]:
        for candidate in shrink_values_towards(self._value, self.target):
            yield ShrinkableInteger(candidate, self.min_value, self.max_value, self.target)


class ShrinkableSample(Shrinkable[Any]):
    """One of a fixed list of samples, shrinking towards the first one."""

    def __init__(self, samples: Sequence[Any], index: int):
        self._samples = samples
        self._index = index

    @property
    def value(self) -> Any:
        return self._samples[self._index]

    def distance(self) -> ShrinkingDistance:
        return ShrinkingDistance.of(self._index)

    def shrink_candidates(self) -> Iterator[Shrinkable[Any]]:
        for index in range(self._index):
            yield ShrinkableSample(self._samples, index)
