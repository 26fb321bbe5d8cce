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
"""Shrinkables combining several independently shrinking parts.

Parts are shrunk one at a time while all other parts are held at their
last falsifying value. A joint minimum over several parts is not searched.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from .distance import ShrinkingDistance
from .shrinkable import Shrinkable


class CombinedShrinkable(Shrinkable[Any]):
    """Combines part shrinkables through a combinator function.

    Attributes:
        parts: Part shrinkables in declared order
    """

    def __init__(
        self,
        parts: Sequence[Shrinkable[Any]],
        combinator: Callable[[List[Any]], Any],
        accept: Optional[Callable[[List[Any]], bool]] = None,
    ):
        self.parts: Tuple[Shrinkable[Any], ...] = tuple(parts)
        self._combinator = combinator
        self._accept = accept
        self._value = combinator([part.value for part in self.parts])

    @property
    def value(self) -> Any:
        return self._value

    def distance(self) -> ShrinkingDistance:
        return ShrinkingDistance.concat(part.distance() for part in self.parts)

    def shrink_candidates(self) -> Iterator[Shrinkable[Any]]:
        for index, part in enumerate(self.parts):
            for candidate in part.shrink_candidates():
                parts = self.parts[:index] + (candidate,) + self.parts[index + 1 :]
                if self._accept is None or self._accept([p.value for p in parts]):
                    yield CombinedShrinkable(parts, self._combinator, self._accept)


def parameters_shrinkable(parameters: Sequence[Shrinkable[Any]]) -> CombinedShrinkable:
    """Combine drawn parameter shrinkables into one producing the value tuple."""
    return CombinedShrinkable(parameters, tuple)
