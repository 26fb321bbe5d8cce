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
"""Random generators: draw shrinkables from a random source.

A RandomGenerator is bound to one size hint and produces a Shrinkable per
call. Generators consume the random source sequentially, so the same seed
always yields the same values.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Generic, Sequence, TypeVar

from ..errors import TooManyFilterMisses
from ..shrinking.numeric import ShrinkableSample
from ..shrinking.shrinkable import Shrinkable, Unshrinkable

T = TypeVar("T")
U = TypeVar("U")

MAX_FILTER_MISSES = 10000


class RandomGenerator(Generic[T]):
    """Produces shrinkables from a random source.

    Attributes:
        description: Short label used in logs and error messages
    """

    def __init__(self, next_shrinkable: Callable[[random.Random], Shrinkable[T]], description: str = "values"):
        self._next = next_shrinkable
        self.description = description

    def next(self, source: random.Random) -> Shrinkable[T]:
        """Draw the next shrinkable."""
        return self._next(source)

    def map(self, mapper: Callable[[T], U]) -> RandomGenerator[U]:
        return RandomGenerator(lambda source: self._next(source).map(mapper), self.description)

    def filter(self, predicate: Callable[[T], bool], max_misses: int = MAX_FILTER_MISSES) -> RandomGenerator[T]:
        """Only produce values accepted by ``predicate``.

        Raises:
            TooManyFilterMisses: From ``next`` after ``max_misses`` rejected draws
        """

        def next_filtered(source: random.Random) -> Shrinkable[T]:
            for _ in range(max_misses):
                shrinkable = self._next(source)
                if predicate(shrinkable.value):
                    return shrinkable.filter(predicate)
            raise TooManyFilterMisses(max_misses, self.description)

        return RandomGenerator(next_filtered, self.description)

    def with_edge_cases(self, probability: float, edge_cases: Sequence[Shrinkable[T]]) -> RandomGenerator[T]:
        """Produce one of ``edge_cases`` with the given probability."""
        if not edge_cases:
            return self

        def next_or_edge(source: random.Random) -> Shrinkable[T]:
            if source.random() < probability:
                return source.choice(edge_cases)
            return self._next(source)

        return RandomGenerator(next_or_edge, self.description)


def choose(values: Sequence[Any]) -> RandomGenerator[Any]:
    """Pick one of ``values`` at random, shrinking towards the first."""
    values = tuple(values)
    return RandomGenerator(
        lambda source: ShrinkableSample(values, source.randrange(len(values))), "choices"
    )


def samples(values: Sequence[Any]) -> RandomGenerator[Any]:
    """Cycle through ``values`` in order, shrinking towards the first.

    The cycle position lives in the generator, so each generator instance
    starts again at the first sample.
    """
    values = tuple(values)
    position = [0]

    def next_sample(source: random.Random) -> Shrinkable[Any]:
        index = position[0] % len(values)
        position[0] += 1
        return ShrinkableSample(values, index)

    return RandomGenerator(next_sample, "samples")


def constant(value: T) -> RandomGenerator[T]:
    return RandomGenerator(lambda source: Unshrinkable(value), "constant")
