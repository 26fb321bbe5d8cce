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
"""String arbitraries built from character sources."""

from __future__ import annotations

import dataclasses
import math
import random
import string
from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from ..errors import ConfigurationError
from ..shrinking.containers import ShrinkableString
from ..shrinking.shrinkable import Shrinkable
from ..types.hints import CharRange, StringLength, code_point
from .base import Arbitrary
from .characters import MAX_CHAR, character_generator
from .generators import RandomGenerator, choose

DEFAULT_MAX_LENGTH = 255


def length_range(min_length: int, max_length: int, size: int) -> Tuple[int, int]:
    """Lengths to draw from for a size hint, clipped to the explicit bounds."""
    return min_length, min(max_length, min_length + math.isqrt(max(size, 0)) + 1)


@dataclass(frozen=True)
class StringArbitrary(Arbitrary[str]):
    """Strings whose characters come from ranges and explicit character sets.

    Attributes:
        char_ranges: Closed code point ranges
        chars: Explicitly allowed characters
        min_length: Inclusive minimum length
        max_length: Inclusive maximum length
    """

    char_ranges: Tuple[Tuple[int, int], ...] = ()
    chars: str = ""
    min_length: int = 0
    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ConfigurationError(f"Minimum length [{self.min_length}] must not be negative")
        if self.min_length > self.max_length:
            raise ConfigurationError(
                f"Minimum length [{self.min_length}] must not be greater than maximum length [{self.max_length}]"
            )

    def with_chars(self, *chars: str) -> StringArbitrary:
        """Also allow the given characters."""
        added = "".join(c for c in "".join(chars) if c not in self.chars)
        return dataclasses.replace(self, chars=self.chars + "".join(dict.fromkeys(added)))

    def with_char_range(self, min_char: Union[str, int], max_char: Union[str, int]) -> StringArbitrary:
        """Also allow all characters in a closed range."""
        min_code, max_code = code_point(min_char), code_point(max_char)
        if min_code > max_code:
            raise ConfigurationError(f"min [{min_char!r}] must not be greater than max [{max_char!r}]")
        return dataclasses.replace(self, char_ranges=self.char_ranges + ((min_code, max_code),))

    def ascii(self) -> StringArbitrary:
        return self.with_char_range(0, 0x7F)

    def alpha(self) -> StringArbitrary:
        return self.with_char_range("a", "z").with_char_range("A", "Z")

    def numeric(self) -> StringArbitrary:
        return self.with_char_range("0", "9")

    def whitespace(self) -> StringArbitrary:
        return self.with_chars(string.whitespace)

    def of_min_length(self, min_length: int) -> StringArbitrary:
        # Drags the maximum along when it would fall below the new minimum
        return dataclasses.replace(self, min_length=min_length, max_length=max(self.max_length, min_length))

    def of_max_length(self, max_length: int) -> StringArbitrary:
        return dataclasses.replace(self, min_length=min(self.min_length, max_length), max_length=max_length)

    def of_length(self, length: int) -> StringArbitrary:
        return dataclasses.replace(self, min_length=length, max_length=length)

    def configure(self, hints: Sequence[Any]) -> StringArbitrary:
        configured = self
        for hint in hints:
            if isinstance(hint, StringLength):
                configured = dataclasses.replace(configured, min_length=hint.min, max_length=hint.max)
            elif isinstance(hint, CharRange):
                configured = configured.with_char_range(hint.min, hint.max)
        return configured

    def generator(self, size: int) -> RandomGenerator[str]:
        sources = [character_generator(low, high) for low, high in self.char_ranges]
        if self.chars:
            sources.append(choose(self.chars))
        if not sources:
            sources.append(character_generator(0, MAX_CHAR))
        low, high = length_range(self.min_length, self.max_length, size)
        min_length = self.min_length

        def next_string(source: random.Random) -> Shrinkable[str]:
            length = source.randint(low, high)
            chars = [source.choice(sources).next(source) for _ in range(length)]
            return ShrinkableString(chars, min_length)

        return RandomGenerator(next_string, "strings")
