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
"""Draws parameter shrinkables for every try of a property."""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Sequence

from ..arbitraries.base import Arbitrary
from ..arbitraries.generators import RandomGenerator
from ..providers.registry import ProviderRegistry
from ..shrinking.shrinkable import Shrinkable
from ..types.descriptor import TypeDescriptor

logger = logging.getLogger(__name__)


class ParameterShrinkablesGenerator:
    """Generates one shrinkable per declared parameter.

    Arbitraries are resolved once; their generators are created afresh by
    :meth:`reset` at the start of every run, so no generator state leaks from
    one run into the next.

    Attributes:
        parameters: Declared parameter types in order
        size: Size hint handed to every arbitrary
    """

    def __init__(
        self,
        parameters: Sequence[TypeDescriptor],
        arbitraries: Sequence[Sequence[Arbitrary[Any]]],
        size: int,
    ) -> None:
        if len(parameters) != len(arbitraries):
            raise ValueError("Every parameter needs a list of arbitraries")
        self.parameters = list(parameters)
        self.size = size
        self._arbitraries = [list(options) for options in arbitraries]
        self._generators: List[List[RandomGenerator[Any]]] = []
        self.reset()

    @classmethod
    def for_parameters(
        cls,
        parameters: Sequence[TypeDescriptor],
        registry: ProviderRegistry,
        size: int,
    ) -> ParameterShrinkablesGenerator:
        """Resolve all parameters before the first try.

        Arbitraries are memoized per descriptor for this resolution pass, so a
        type used by several parameters is resolved once.

        Raises:
            CannotResolveArbitrary: If any parameter cannot be resolved
        """
        cache: Dict[TypeDescriptor, List[Arbitrary[Any]]] = {}
        arbitraries: List[List[Arbitrary[Any]]] = []
        for parameter in parameters:
            if parameter not in cache:
                cache[parameter] = registry.resolve(parameter)
                logger.debug(f"Parameter type {parameter} has {len(cache[parameter])} arbitraries")
            arbitraries.append(cache[parameter])
        return cls(parameters, arbitraries, size)

    def reset(self) -> None:
        """Create fresh generators; called at the start of every run."""
        # Parameters resolved to the same arbitrary share one generator
        generators: Dict[int, RandomGenerator[Any]] = {}
        for options in self._arbitraries:
            for arbitrary in options:
                if id(arbitrary) not in generators:
                    generators[id(arbitrary)] = arbitrary.generator(self.size)
        self._generators = [[generators[id(arbitrary)] for arbitrary in options] for options in self._arbitraries]

    def next(self, source: random.Random) -> List[Shrinkable[Any]]:
        """Draw the shrinkables for one try, in parameter order.

        Where several generators are available one is chosen per try; within
        a try, parameters of the same type share the choice.
        """
        chosen: Dict[TypeDescriptor, RandomGenerator[Any]] = {}
        shrinkables: List[Shrinkable[Any]] = []
        for parameter, options in zip(self.parameters, self._generators):
            generator = chosen.get(parameter)
            if generator is None:
                generator = options[0] if len(options) == 1 else source.choice(options)
                chosen[parameter] = generator
            shrinkables.append(generator.next(source))
        return shrinkables
