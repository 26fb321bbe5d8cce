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
"""Well-founded complexity measure used to order shrink candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True, order=True)
class ShrinkingDistance:
    """Lexicographically ordered tuple of non-negative integers.

    Every shrinkable kind produces distances of a fixed number of dimensions,
    so that comparing two candidates of the same structure is well-founded.
    """

    dimensions: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if any(d < 0 for d in self.dimensions):
            raise ValueError(f"Shrinking distances must not be negative: {self.dimensions}")

    @classmethod
    def of(cls, *dimensions: int) -> ShrinkingDistance:
        return cls(tuple(dimensions))

    @classmethod
    def concat(cls, distances: Iterable[ShrinkingDistance]) -> ShrinkingDistance:
        """Concatenate distances of independent parts, in order."""
        result: Tuple[int, ...] = ()
        for distance in distances:
            result += distance.dimensions
        return cls(result)

    def append(self, other: ShrinkingDistance) -> ShrinkingDistance:
        return ShrinkingDistance(self.dimensions + other.dimensions)

    def total(self) -> int:
        """Sum over all dimensions."""
        return sum(self.dimensions)

    def __str__(self) -> str:
        return f"ShrinkingDistance{list(self.dimensions)}"
