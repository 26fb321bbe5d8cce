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
"""Registry resolving declared types to candidate arbitraries.

Resolution scans every registered provider in registration order and unions
the arbitraries of all providers that support the target type. Nested types,
such as container element types, are resolved through the same registry.

Example:
    >>> registry = ProviderRegistry.defaults()
    >>> registry.resolve(TypeDescriptor.of(list, int))
    [ListArbitrary(element=IntegralArbitrary(...), ...)]
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from ..arbitraries.base import Arbitrary
from ..errors import CannotResolveArbitrary
from ..types.descriptor import TypeDescriptor
from .base import ArbitraryProvider
from .defaults import default_providers

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Open, ordered list of arbitrary providers.

    The host supplies the providers; there is no discovery mechanism.
    """

    def __init__(self, providers: Optional[Iterable[ArbitraryProvider]] = None) -> None:
        self._providers: List[ArbitraryProvider] = list(providers or [])

    @classmethod
    def defaults(cls) -> ProviderRegistry:
        """Create a registry holding the default providers."""
        return cls(default_providers())

    @property
    def providers(self) -> List[ArbitraryProvider]:
        return list(self._providers)

    def register(self, provider: ArbitraryProvider) -> None:
        """Append a provider; it is consulted after all earlier ones."""
        self._providers.append(provider)

    def resolve(self, target: TypeDescriptor) -> List[Arbitrary[Any]]:
        """Resolve a declared type to all compatible arbitraries.

        Args:
            target: The declared type, with any configuration hints attached

        Returns:
            Candidate arbitraries in provider order, without duplicates. Every
            candidate is valid; none is preferred.

        Raises:
            CannotResolveArbitrary: If no provider supports the type
        """
        arbitraries = self.resolve_subtype(target)
        if not arbitraries:
            raise CannotResolveArbitrary(target)
        return arbitraries

    def resolve_subtype(self, target: TypeDescriptor) -> List[Arbitrary[Any]]:
        """Like :meth:`resolve` but returns an empty list instead of raising."""
        arbitraries: List[Arbitrary[Any]] = []
        for provider in self._providers:
            if not provider.can_provide_for(target):
                continue
            for arbitrary in provider.provide_for(target, self.resolve_subtype):
                if target.annotations:
                    arbitrary = arbitrary.configure(target.annotations)
                if arbitrary not in arbitraries:
                    arbitraries.append(arbitrary)
        logger.debug(f"Resolved {target} to {len(arbitraries)} arbitraries")
        return arbitraries
