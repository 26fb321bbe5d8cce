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
"""Configuration hints attached to type descriptors as metadata tags.

Hints travel with a declared parameter's descriptor, e.g.
``Annotated[int, IntRange(1, 100)]``, and are applied to every arbitrary
resolved for that parameter. Arbitraries ignore hints they do not understand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..errors import ConfigurationError


def _check_range(kind: str, low: object, high: object) -> None:
    if low > high:  # type: ignore[operator]
        raise ConfigurationError(f"{kind}: min [{low}] must not be greater than max [{high}]")


@dataclass(frozen=True, slots=True)
class IntRange:
    """Inclusive bounds for integral and decimal values."""

    min: int = 0
    max: int = 2**31 - 1

    def __post_init__(self) -> None:
        _check_range("IntRange", self.min, self.max)


@dataclass(frozen=True, slots=True)
class CharRange:
    """Inclusive character range for characters and strings.

    Attributes:
        min: Lowest character, as a one-character string or code point
        max: Highest character, as a one-character string or code point
    """

    min: Union[str, int] = "\u0000"
    max: Union[str, int] = "\uffff"

    def __post_init__(self) -> None:
        _check_range("CharRange", code_point(self.min), code_point(self.max))


@dataclass(frozen=True, slots=True)
class StringLength:
    """Inclusive length bounds for strings."""

    min: int = 0
    max: int = 255

    def __post_init__(self) -> None:
        if self.min < 0:
            raise ConfigurationError(f"StringLength: min [{self.min}] must not be negative")
        _check_range("StringLength", self.min, self.max)


@dataclass(frozen=True, slots=True)
class Size:
    """Inclusive size bounds for lists, sets and arrays."""

    min: int = 0
    max: int = 255

    def __post_init__(self) -> None:
        if self.min < 0:
            raise ConfigurationError(f"Size: min [{self.min}] must not be negative")
        _check_range("Size", self.min, self.max)


@dataclass(frozen=True, slots=True)
class Scale:
    """Number of decimal places for generated floats."""

    places: int = 2

    def __post_init__(self) -> None:
        if self.places < 0:
            raise ConfigurationError(f"Scale: places [{self.places}] must not be negative")


def code_point(char: Union[str, int]) -> int:
    """Normalize a character given as string or code point to a code point."""
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ConfigurationError(f"Expected a single character, got [{char!r}]")
    return ord(char)
