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
"""Shrinkables for lists, tuples, strings and sets.

Containers first try to remove elements, largest chunks first, and only then
shrink the surviving elements one at a time. Removal never goes below the
container's minimum size.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterator, List, Sequence, Set, Tuple

from .distance import ShrinkingDistance
from .falsifier import Falsifier
from .sequence import ShrinkingSequence
from .shrinkable import Shrinkable


class ShrinkableContainer(Shrinkable[Any]):
    """Base class for shrinkables built from element shrinkables.

    Attributes:
        elements: Element shrinkables in order
        min_size: Structural floor for the number of elements
    """

    def __init__(self, elements: Sequence[Shrinkable[Any]], min_size: int = 0):
        self.elements: Tuple[Shrinkable[Any], ...] = tuple(elements)
        self.min_size = min_size
        self._value = self._create_value([element.value for element in self.elements])

    @abstractmethod
    def _create_value(self, values: List[Any]) -> Any:
        pass

    @property
    def value(self) -> Any:
        return self._value

    def distance(self) -> ShrinkingDistance:
        return ShrinkingDistance.of(
            len(self.elements),
            sum(element.distance().total() for element in self.elements),
        )

    def shrink_candidates(self) -> Iterator[Shrinkable[Any]]:
        yield from self._removal_candidates()
        yield from self._element_candidates()

    def _with_elements(self, elements: Sequence[Shrinkable[Any]]) -> ShrinkableContainer:
        return type(self)(elements, self.min_size)

    def _removal_candidates(self) -> Iterator[Shrinkable[Any]]:
        size = len(self.elements)
        chunk = size - self.min_size
        while chunk > 0:
            for start in range(size - chunk + 1):
                yield self._with_elements(self.elements[:start] + self.elements[start + chunk :])
            chunk //= 2

    def _element_candidates(self) -> Iterator[Shrinkable[Any]]:
        for index, element in enumerate(self.elements):
            for candidate in element.shrink_candidates():
                yield self._with_elements(
                    self.elements[:index] + (candidate,) + self.elements[index + 1 :]
                )


class ShrinkableList(ShrinkableContainer):
    def _create_value(self, values: List[Any]) -> List[Any]:
        return values


class ShrinkableTuple(ShrinkableContainer):
    """Homogeneous variable-length tuple (array)."""

    def _create_value(self, values: List[Any]) -> Tuple[Any, ...]:
        return tuple(values)


class ShrinkableString(ShrinkableContainer):
    """String built from single-character shrinkables."""

    def _create_value(self, values: List[str]) -> str:
        return "".join(values)


class ShrinkableSet(ShrinkableContainer):
    """Set of distinct elements with a minimum size.

    Shrinking an element may make it equal to another one; such candidates
    collapse the duplicates and are dropped if they fall below ``min_size``.
    """

    def __init__(self, elements: Sequence[Shrinkable[Any]], min_size: int = 0):
        seen: List[Any] = []
        distinct: List[Shrinkable[Any]] = []
        for element in elements:
            if element.value not in seen:
                seen.append(element.value)
                distinct.append(element)
        super().__init__(distinct, min_size)

    def _create_value(self, values: List[Any]) -> Set[Any]:
        return set(values)

    def shrink_candidates(self) -> Iterator[Shrinkable[Any]]:
        for candidate in super().shrink_candidates():
            if len(candidate.value) >= self.min_size:
                yield candidate

    def shrink(self, falsifier: Falsifier[Any]) -> ShrinkingSequence[Any]:
        floor = self.min_size
        return super().shrink(falsifier.with_filter(lambda value: len(value) >= floor))
