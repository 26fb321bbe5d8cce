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
"""Character arbitraries.

Restrictions such as ``ascii()`` or ``digit()`` are closed sub-ranges of the
full character range. Characters shrink towards the lowest allowed one.
"""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Any, Sequence, Union

from ..errors import ConfigurationError
from ..shrinking.numeric import ShrinkableInteger
from ..shrinking.shrinkable import Shrinkable
from ..types.hints import CharRange, code_point
from .base import Arbitrary
from .generators import RandomGenerator

MAX_ASCII = 0x7F
MAX_CHAR = 0xFFFF

# Probability of drawing min or max instead of a random character
EDGE_CASE_PROBABILITY = 0.05


def character_generator(min_code: int, max_code: int) -> RandomGenerator[str]:
    """Characters with code points in ``[min_code, max_code]``."""

    def next_character(source: random.Random) -> Shrinkable[str]:
        return ShrinkableInteger(source.randint(min_code, max_code), min_code, max_code, min_code).map(chr)

    edge_cases = [
        ShrinkableInteger(edge, min_code, max_code, min_code).map(chr)
        for edge in sorted({min_code, max_code})
    ]
    return RandomGenerator(next_character, "characters").with_edge_cases(EDGE_CASE_PROBABILITY, edge_cases)


@dataclass(frozen=True)
class CharacterArbitrary(Arbitrary[str]):
    """Single characters with code points between inclusive bounds."""

    min_code: int = 0
    max_code: int = MAX_CHAR

    def __post_init__(self) -> None:
        if self.min_code > self.max_code:
            raise ConfigurationError(
                f"min [{self.min_code:#x}] must not be greater than max [{self.max_code:#x}]"
            )

    def between(self, min_char: Union[str, int], max_char: Union[str, int]) -> CharacterArbitrary:
        """Restrict to a closed range given as characters or code points."""
        min_code, max_code = code_point(min_char), code_point(max_char)
        if min_code > max_code:
            raise ConfigurationError(f"min [{min_char!r}] must not be greater than max [{max_char!r}]")
        return dataclasses.replace(self, min_code=min_code, max_code=max_code)

    def ascii(self) -> CharacterArbitrary:
        return self.between(0, MAX_ASCII)

    def digit(self) -> CharacterArbitrary:
        return self.between("0", "9")

    def all(self) -> CharacterArbitrary:
        return self.between(0, MAX_CHAR)

    def configure(self, hints: Sequence[Any]) -> CharacterArbitrary:
        configured = self
        for hint in hints:
            if isinstance(hint, CharRange):
                configured = configured.between(hint.min, hint.max)
        return configured

    def generator(self, size: int) -> RandomGenerator[str]:
        return character_generator(self.min_code, self.max_code)
