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
"""Entry points for creating arbitraries.

Example:
    >>> ages = Arbitraries.integers().between(0, 130)
    >>> names = Arbitraries.strings().alpha().of_min_length(1)
    >>> teams = Arbitraries.sets(names).of_max_size(5)
"""

from __future__ import annotations

import ctypes
from enum import Enum
from typing import Any, Type

from ..errors import ConfigurationError
from ..types.primitives import INTEGRAL_BOUNDS
from .base import Arbitrary
from .characters import CharacterArbitrary
from .containers import ArrayArbitrary, ListArbitrary, SetArbitrary
from .numbers import DecimalArbitrary, IntegralArbitrary
from .samples import ChoiceArbitrary, ConstantArbitrary, SampleArbitrary
from .strings import StringArbitrary


class Arbitraries:
    """Static factory for the default arbitraries."""

    @staticmethod
    def integers() -> IntegralArbitrary:
        """32 bit integers."""
        return IntegralArbitrary(*INTEGRAL_BOUNDS[ctypes.c_int])

    @staticmethod
    def longs() -> IntegralArbitrary:
        """64 bit integers."""
        return IntegralArbitrary(-(2**63), 2**63 - 1)

    @staticmethod
    def shorts() -> IntegralArbitrary:
        return IntegralArbitrary(*INTEGRAL_BOUNDS[ctypes.c_short])

    @staticmethod
    def bytes_() -> IntegralArbitrary:
        return IntegralArbitrary(*INTEGRAL_BOUNDS[ctypes.c_byte])

    @staticmethod
    def floats() -> DecimalArbitrary:
        return DecimalArbitrary()

    @staticmethod
    def doubles() -> DecimalArbitrary:
        return DecimalArbitrary(scale=4)

    @staticmethod
    def booleans() -> ChoiceArbitrary:
        return ChoiceArbitrary((False, True))

    @staticmethod
    def chars() -> CharacterArbitrary:
        return CharacterArbitrary()

    @staticmethod
    def strings() -> StringArbitrary:
        return StringArbitrary()

    @staticmethod
    def of(*values: Any) -> ChoiceArbitrary:
        """Pick one of ``values`` at random."""
        return ChoiceArbitrary(tuple(values))

    @staticmethod
    def of_enum(enum_class: Type[Enum]) -> ChoiceArbitrary:
        members = tuple(enum_class)
        if not members:
            raise ConfigurationError(f"Enum [{enum_class.__qualname__}] has no members")
        return ChoiceArbitrary(members)

    @staticmethod
    def samples(*values: Any) -> SampleArbitrary:
        """Produce ``values`` in order, starting over after the last one."""
        return SampleArbitrary(tuple(values))

    @staticmethod
    def constant(value: Any) -> ConstantArbitrary:
        return ConstantArbitrary(value)

    @staticmethod
    def lists(element: Arbitrary[Any]) -> ListArbitrary:
        return ListArbitrary(element)

    @staticmethod
    def sets(element: Arbitrary[Any]) -> SetArbitrary:
        return SetArbitrary(element)

    @staticmethod
    def arrays(element: Arbitrary[Any]) -> ArrayArbitrary:
        return ArrayArbitrary(element)
