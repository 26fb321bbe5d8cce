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
"""Arbitraries over fixed value lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..errors import ConfigurationError
from .base import Arbitrary
from .generators import RandomGenerator, choose, constant, samples


@dataclass(frozen=True)
class ChoiceArbitrary(Arbitrary[Any]):
    """Picks one of the values at random; shrinks towards the first."""

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ConfigurationError("At least one value is required")

    def generator(self, size: int) -> RandomGenerator[Any]:
        return choose(self.values)


@dataclass(frozen=True)
class SampleArbitrary(Arbitrary[Any]):
    """Produces the values in order, cycling; shrinks towards the first."""

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ConfigurationError("At least one sample is required")

    def generator(self, size: int) -> RandomGenerator[Any]:
        return samples(self.values)


@dataclass(frozen=True)
class ConstantArbitrary(Arbitrary[Any]):
    value: Any

    def generator(self, size: int) -> RandomGenerator[Any]:
        return constant(self.value)
