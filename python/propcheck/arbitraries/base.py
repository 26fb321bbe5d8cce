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
"""Arbitraries: immutable specifications of how to generate values.

Arbitraries are frozen dataclasses configured through builder methods that
return modified copies. ``generator(size)`` binds an arbitrary to a size hint
and returns the RandomGenerator used during a property run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Sequence, TypeVar

from .generators import MAX_FILTER_MISSES, RandomGenerator

if TYPE_CHECKING:
    from .containers import ArrayArbitrary, ListArbitrary, SetArbitrary

T = TypeVar("T")
U = TypeVar("U")


class Arbitrary(ABC, Generic[T]):
    """Specification of values of one type."""

    @abstractmethod
    def generator(self, size: int) -> RandomGenerator[T]:
        """Create a generator for the given size hint.

        Args:
            size: Non-negative hint; larger sizes widen numeric ranges and
                lengthen collections, but never beyond explicit bounds

        Returns:
            The random generator
        """
        pass

    def configure(self, hints: Sequence[Any]) -> Arbitrary[T]:
        """Apply configuration hints; hints that do not apply are ignored."""
        return self

    def map(self, mapper: Callable[[T], U]) -> Arbitrary[U]:
        return MappedArbitrary(self, mapper)

    def filter(self, predicate: Callable[[T], bool]) -> Arbitrary[T]:
        return FilteredArbitrary(self, predicate)

    def list(self) -> ListArbitrary:
        from .containers import ListArbitrary

        return ListArbitrary(self)

    def set(self) -> SetArbitrary:
        from .containers import SetArbitrary

        return SetArbitrary(self)

    def array(self) -> ArrayArbitrary:
        from .containers import ArrayArbitrary

        return ArrayArbitrary(self)


@dataclass(frozen=True)
class MappedArbitrary(Arbitrary[U]):
    source: Arbitrary[Any]
    mapper: Callable[[Any], U]

    def generator(self, size: int) -> RandomGenerator[U]:
        return self.source.generator(size).map(self.mapper)

    def configure(self, hints: Sequence[Any]) -> Arbitrary[U]:
        return MappedArbitrary(self.source.configure(hints), self.mapper)


@dataclass(frozen=True)
class FilteredArbitrary(Arbitrary[T]):
    source: Arbitrary[T]
    predicate: Callable[[T], bool]
    max_misses: int = MAX_FILTER_MISSES

    def generator(self, size: int) -> RandomGenerator[T]:
        return self.source.generator(size).filter(self.predicate, self.max_misses)

    def configure(self, hints: Sequence[Any]) -> Arbitrary[T]:
        return FilteredArbitrary(self.source.configure(hints), self.predicate, self.max_misses)
