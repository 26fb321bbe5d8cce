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
"""Combinators composing several arbitraries into one.

Example:
    >>> points = combine(Arbitraries.integers(), Arbitraries.integers()).as_(Point)

Component values are drawn in declared order from the shared random source.
The combined value shrinks by shrinking one component at a time while the
others keep their last falsifying value.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from ..errors import TooManyFilterMisses
from ..shrinking.combined import CombinedShrinkable
from ..shrinking.shrinkable import Shrinkable
from .base import Arbitrary
from .generators import MAX_FILTER_MISSES, RandomGenerator


@dataclass(frozen=True)
class CombinedArbitrary(Arbitrary[Any]):
    """Arbitrary mapping one value from each component through a function.

    Attributes:
        components: Component arbitraries in declared order
        combinator: Called with one value per component
        accept: Optional filter over the component values
    """

    components: Tuple[Arbitrary[Any], ...]
    combinator: Callable[..., Any]
    accept: Optional[Callable[..., bool]] = None

    def generator(self, size: int) -> RandomGenerator[Any]:
        generators = [component.generator(size) for component in self.components]
        combinator = self.combinator
        accept = None if self.accept is None else (lambda values, f=self.accept: f(*values))

        def next_combined(source: random.Random) -> Shrinkable[Any]:
            for _ in range(MAX_FILTER_MISSES):
                parts = [generator.next(source) for generator in generators]
                if accept is None or accept([part.value for part in parts]):
                    return CombinedShrinkable(parts, lambda values: combinator(*values), accept)
            raise TooManyFilterMisses(MAX_FILTER_MISSES, "combined values")

        return RandomGenerator(next_combined, "combined values")


class Combinator:
    """Builder returned by :func:`combine`."""

    def __init__(self, components: Tuple[Arbitrary[Any], ...], accept: Optional[Callable[..., bool]] = None):
        self._components = components
        self._accept = accept

    def filter(self, accept: Callable[..., bool]) -> Combinator:
        """Only combine component values for which ``accept(*values)`` holds."""
        if self._accept is None:
            return Combinator(self._components, accept)
        previous = self._accept
        return Combinator(self._components, lambda *values: previous(*values) and accept(*values))

    def as_(self, combinator: Callable[..., Any]) -> Arbitrary[Any]:
        """Combine the component values with ``combinator``."""
        return CombinedArbitrary(self._components, combinator, self._accept)


def combine(*arbitraries: Arbitrary[Any]) -> Combinator:
    return Combinator(tuple(arbitraries))
