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
"""List, set and array arbitraries."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from ..errors import ConfigurationError, TooManyFilterMisses
from ..shrinking.containers import ShrinkableContainer, ShrinkableList, ShrinkableSet, ShrinkableTuple
from ..shrinking.shrinkable import Shrinkable
from ..types.hints import Size
from .base import Arbitrary
from .generators import RandomGenerator
from .strings import DEFAULT_MAX_LENGTH, length_range

# Consecutive duplicate draws after which a set stops growing
MAX_DUPLICATE_DRAWS = 100


@dataclass(frozen=True)
class ContainerArbitrary(Arbitrary[Any]):
    """Common size handling for container arbitraries.

    Attributes:
        element: Arbitrary for the elements
        min_size: Inclusive minimum number of elements
        max_size: Inclusive maximum number of elements
    """

    element: Arbitrary[Any]
    min_size: int = 0
    max_size: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        if self.min_size < 0:
            raise ConfigurationError(f"Minimum size [{self.min_size}] must not be negative")
        if self.min_size > self.max_size:
            raise ConfigurationError(
                f"Minimum size [{self.min_size}] must not be greater than maximum size [{self.max_size}]"
            )

    def of_min_size(self, min_size: int):
        """Set the minimum size; a maximum below it is raised to match."""
        return dataclasses.replace(self, min_size=min_size, max_size=max(self.max_size, min_size))

    def of_max_size(self, max_size: int):
        """Set the maximum size; a minimum above it is lowered to match."""
        return dataclasses.replace(self, min_size=min(self.min_size, max_size), max_size=max_size)

    def of_size(self, size: int):
        return dataclasses.replace(self, min_size=size, max_size=size)

    def configure(self, hints: Sequence[Any]):
        configured = self
        for hint in hints:
            if isinstance(hint, Size):
                configured = dataclasses.replace(configured, min_size=hint.min, max_size=hint.max)
        return configured


def sequence_generator(
    element: RandomGenerator[Any],
    min_size: int,
    max_size: int,
    size: int,
    create: Callable[[List[Shrinkable[Any]], int], ShrinkableContainer],
) -> RandomGenerator[Any]:
    low, high = length_range(min_size, max_size, size)

    def next_sequence(source: random.Random) -> Shrinkable[Any]:
        length = source.randint(low, high)
        return create([element.next(source) for _ in range(length)], min_size)

    return RandomGenerator(next_sequence, f"sequences of {element.description}")


@dataclass(frozen=True)
class ListArbitrary(ContainerArbitrary):
    def generator(self, size: int) -> RandomGenerator[List[Any]]:
        return sequence_generator(
            self.element.generator(size), self.min_size, self.max_size, size, ShrinkableList
        )


@dataclass(frozen=True)
class ArrayArbitrary(ContainerArbitrary):
    """Homogeneous tuples of variable length."""

    def generator(self, size: int) -> RandomGenerator[tuple]:
        return sequence_generator(
            self.element.generator(size), self.min_size, self.max_size, size, ShrinkableTuple
        )


@dataclass(frozen=True)
class SetArbitrary(ContainerArbitrary):
    """Sets of distinct elements; never shrinks below ``min_size``.

    Elements are drawn until the chosen size is reached. After
    ``MAX_DUPLICATE_DRAWS`` duplicates in a row the set is returned as is,
    provided it already holds ``min_size`` elements.
    """

    def generator(self, size: int) -> RandomGenerator[set]:
        element = self.element.generator(size)
        low, high = length_range(self.min_size, self.max_size, size)
        min_size = self.min_size

        def next_set(source: random.Random) -> Shrinkable[set]:
            length = source.randint(low, high)
            elements: List[Shrinkable[Any]] = []
            values: List[Any] = []
            duplicates = 0
            while len(elements) < length:
                candidate = element.next(source)
                if candidate.value not in values:
                    elements.append(candidate)
                    values.append(candidate.value)
                    duplicates = 0
                    continue
                duplicates += 1
                if duplicates < MAX_DUPLICATE_DRAWS:
                    continue
                if len(elements) >= min_size:
                    break
                raise TooManyFilterMisses(duplicates, f"distinct {element.description}")
            return ShrinkableSet(elements, min_size)

        return RandomGenerator(next_set, f"sets of {element.description}")
