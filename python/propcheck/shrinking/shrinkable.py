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
"""Shrinkable values: a generated value plus its simpler candidates.

Each shrinkable proposes strictly simpler candidates, simplest first. The
generic driver in :mod:`propcheck.shrinking.sequence` walks those candidates
with a falsifier until it reaches a local minimum.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, TypeVar

from .distance import ShrinkingDistance
from .falsifier import Falsifier
from .sequence import ShrinkingSequence

T = TypeVar("T")
U = TypeVar("U")


class Shrinkable(ABC, Generic[T]):
    """A value together with the capability to propose simpler values."""

    @property
    @abstractmethod
    def value(self) -> T:
        """The concrete value."""
        pass

    @abstractmethod
    def distance(self) -> ShrinkingDistance:
        """Complexity of this value; candidates must be strictly smaller."""
        pass

    @abstractmethod
    def shrink_candidates(self) -> Iterator[Shrinkable[T]]:
        """Lazily yield simpler candidates, simplest first."""
        pass

    def shrink(self, falsifier: Falsifier[T]) -> ShrinkingSequence[T]:
        """Return the shrinking sequence for this value.

        Args:
            falsifier: Re-tests candidates; this value must falsify it

        Returns:
            A restartable shrinking sequence starting at this value
        """
        return ShrinkingSequence(self, falsifier)

    def map(self, mapper: Callable[[T], U]) -> Shrinkable[U]:
        return MappedShrinkable(self, mapper)

    def filter(self, predicate: Callable[[T], bool]) -> Shrinkable[T]:
        return FilteredShrinkable(self, predicate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Unshrinkable(Shrinkable[T]):
    """A value that cannot be simplified."""

    def __init__(self, value: T):
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def distance(self) -> ShrinkingDistance:
        return ShrinkingDistance.of(0)

    def shrink_candidates(self) -> Iterator[Shrinkable[T]]:
        return iter(())


class MappedShrinkable(Shrinkable[U]):
    """Shrinks the underlying value and maps every candidate."""

    def __init__(self, inner: Shrinkable[Any], mapper: Callable[[Any], U]):
        self._inner = inner
        self._mapper = mapper
        self._value = mapper(inner.value)

    @property
    def value(self) -> U:
        return self._value

    def distance(self) -> ShrinkingDistance:
        return self._inner.distance()

    def shrink_candidates(self) -> Iterator[Shrinkable[U]]:
        for candidate in self._inner.shrink_candidates():
            yield MappedShrinkable(candidate, self._mapper)


class FilteredShrinkable(Shrinkable[T]):
    """Only proposes candidates whose value satisfies a predicate."""

    def __init__(self, inner: Shrinkable[T], predicate: Callable[[T], bool]):
        self._inner = inner
        self._predicate = predicate

    @property
    def value(self) -> T:
        return self._inner.value

    def distance(self) -> ShrinkingDistance:
        return self._inner.distance()

    def shrink_candidates(self) -> Iterator[Shrinkable[T]]:
        for candidate in self._inner.shrink_candidates():
            if self._predicate(candidate.value):
                yield FilteredShrinkable(candidate, self._predicate)
