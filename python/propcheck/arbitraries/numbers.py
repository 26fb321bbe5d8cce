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
"""Integral and decimal arbitraries."""

from __future__ import annotations

import dataclasses
import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..errors import ConfigurationError
from ..shrinking.numeric import ShrinkableInteger, default_shrink_target
from ..shrinking.shrinkable import Shrinkable
from ..types.hints import IntRange, Scale
from .base import Arbitrary
from .generators import RandomGenerator

# Probability of drawing min, max or the shrink target instead of a random value
EDGE_CASE_PROBABILITY = 0.125

INT_MIN, INT_MAX = -(2**31), 2**31 - 1


def _check_range(min_value: Any, max_value: Any) -> None:
    if min_value > max_value:
        raise ConfigurationError(f"min [{min_value}] must not be greater than max [{max_value}]")


def integral_generator(min_value: int, max_value: int, target: int, size: int) -> RandomGenerator[int]:
    """Generator for integers in ``[min_value, max_value]`` shrinking to ``target``.

    Values are drawn from a window of ``size ** 2`` around the target,
    clipped to the bounds. Bounds and target are drawn as edge cases.
    """
    window = max(size, 1) ** 2
    low = max(min_value, target - window)
    high = min(max_value, target + window)

    def next_integer(source: random.Random) -> Shrinkable[int]:
        return ShrinkableInteger(source.randint(low, high), min_value, max_value, target)

    edge_cases = [
        ShrinkableInteger(edge, min_value, max_value, target)
        for edge in sorted({min_value, max_value, target})
    ]
    return RandomGenerator(next_integer, "integers").with_edge_cases(EDGE_CASE_PROBABILITY, edge_cases)


@dataclass(frozen=True)
class IntegralArbitrary(Arbitrary[int]):
    """Integers between inclusive bounds.

    Attributes:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        shrink_target: Shrinking goal; zero or the bound nearest to zero by default
    """

    min_value: int = INT_MIN
    max_value: int = INT_MAX
    shrink_target: Optional[int] = None

    def __post_init__(self) -> None:
        _check_range(self.min_value, self.max_value)
        if self.shrink_target is not None and not self.min_value <= self.shrink_target <= self.max_value:
            raise ConfigurationError(
                f"Shrink target [{self.shrink_target}] outside of range "
                f"[{self.min_value}, {self.max_value}]"
            )

    def between(self, min_value: int, max_value: int) -> IntegralArbitrary:
        """Restrict to ``[min_value, max_value]``; fails fast if min > max."""
        _check_range(min_value, max_value)
        return dataclasses.replace(self, min_value=min_value, max_value=max_value, shrink_target=None)

    def greater_or_equal(self, min_value: int) -> IntegralArbitrary:
        return self.between(min_value, self.max_value)

    def less_or_equal(self, max_value: int) -> IntegralArbitrary:
        return self.between(self.min_value, max_value)

    def shrink_towards(self, target: int) -> IntegralArbitrary:
        return dataclasses.replace(self, shrink_target=target)

    def target(self) -> int:
        if self.shrink_target is not None:
            return self.shrink_target
        return default_shrink_target(self.min_value, self.max_value)

    def configure(self, hints: Sequence[Any]) -> IntegralArbitrary:
        configured = self
        for hint in hints:
            if isinstance(hint, IntRange):
                configured = configured.between(hint.min, hint.max)
        return configured

    def generator(self, size: int) -> RandomGenerator[int]:
        return integral_generator(self.min_value, self.max_value, self.target(), size)


@dataclass(frozen=True)
class DecimalArbitrary(Arbitrary[float]):
    """Floats with a fixed number of decimal places.

    Values are generated as scaled integers, so they shrink like integers
    towards zero or the bound nearest to zero.

    Attributes:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        scale: Number of decimal places
    """

    min_value: float = float(INT_MIN)
    max_value: float = float(INT_MAX)
    scale: int = 2

    def __post_init__(self) -> None:
        _check_range(self.min_value, self.max_value)
        if self.scale < 0:
            raise ConfigurationError(f"Scale [{self.scale}] must not be negative")
        if self._scaled_min() > self._scaled_max():
            raise ConfigurationError(
                f"No value with {self.scale} decimal places in [{self.min_value}, {self.max_value}]"
            )

    def between(self, min_value: float, max_value: float) -> DecimalArbitrary:
        _check_range(min_value, max_value)
        return dataclasses.replace(self, min_value=float(min_value), max_value=float(max_value))

    def greater_or_equal(self, min_value: float) -> DecimalArbitrary:
        return self.between(min_value, self.max_value)

    def less_or_equal(self, max_value: float) -> DecimalArbitrary:
        return self.between(self.min_value, max_value)

    def of_scale(self, scale: int) -> DecimalArbitrary:
        return dataclasses.replace(self, scale=scale)

    def configure(self, hints: Sequence[Any]) -> DecimalArbitrary:
        configured = self
        for hint in hints:
            if isinstance(hint, IntRange):
                configured = configured.between(hint.min, hint.max)
            elif isinstance(hint, Scale):
                configured = configured.of_scale(hint.places)
        return configured

    def _scaled_min(self) -> int:
        return math.ceil(round(self.min_value * 10**self.scale, 6))

    def _scaled_max(self) -> int:
        return math.floor(round(self.max_value * 10**self.scale, 6))

    def generator(self, size: int) -> RandomGenerator[float]:
        scaled_min, scaled_max = self._scaled_min(), self._scaled_max()
        unit = 10**self.scale
        target = default_shrink_target(scaled_min, scaled_max)
        return integral_generator(scaled_min, scaled_max, target, size).map(
            lambda scaled: scaled / unit
        )
