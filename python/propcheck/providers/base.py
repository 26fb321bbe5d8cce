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
"""Provider protocol for type-directed arbitrary resolution."""

from __future__ import annotations

from typing import Any, Callable, List, Protocol, runtime_checkable

from ..arbitraries.base import Arbitrary
from ..types.descriptor import TypeDescriptor

# Resolves a nested type (e.g. a container's element type) through the
# registry; returns an empty list when nothing matches.
SubtypeProvider = Callable[[TypeDescriptor], List[Arbitrary[Any]]]


@runtime_checkable
class ArbitraryProvider(Protocol):
    """Produces candidate arbitraries for the types it supports.

    Providers that build containers resolve their element types through the
    ``subtype_provider`` callback instead of knowing other providers.
    """

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        """Check whether this provider supports the target type."""
        ...

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        """Return arbitraries producing values compatible with ``target``.

        Args:
            target: The required type
            subtype_provider: Resolves nested types through the registry

        Returns:
            Candidate arbitraries, possibly empty
        """
        ...
