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
"""Arbitraries, random generators and combinators."""

from .base import Arbitrary, FilteredArbitrary, MappedArbitrary
from .characters import CharacterArbitrary
from .combinators import CombinedArbitrary, Combinator, combine
from .containers import ArrayArbitrary, ListArbitrary, SetArbitrary
from .factory import Arbitraries
from .generators import RandomGenerator
from .numbers import DecimalArbitrary, IntegralArbitrary
from .samples import ChoiceArbitrary, ConstantArbitrary, SampleArbitrary
from .strings import StringArbitrary

__all__ = [
    "Arbitrary",
    "Arbitraries",
    "RandomGenerator",
    "MappedArbitrary",
    "FilteredArbitrary",
    "IntegralArbitrary",
    "DecimalArbitrary",
    "CharacterArbitrary",
    "StringArbitrary",
    "ListArbitrary",
    "SetArbitrary",
    "ArrayArbitrary",
    "ChoiceArbitrary",
    "SampleArbitrary",
    "ConstantArbitrary",
    "CombinedArbitrary",
    "Combinator",
    "combine",
]
