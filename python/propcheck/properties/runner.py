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
"""Convenience entry point for checking a predicate against declared types.

Example:
    >>> result = check_property(
    ...     "reverse twice",
    ...     [list[int]],
    ...     lambda xs: list(reversed(list(reversed(xs)))) == xs,
    ... )
    >>> result.status
    <PropertyStatus.SATISFIED: 1>
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from ..providers.registry import ProviderRegistry
from ..types.descriptor import TypeDescriptor
from .check import checked
from .configuration import PropertyConfiguration
from .generic import GenericProperty
from .reporting import NULL_REPORTER, Reporter
from .result import PropertyCheckResult
from .shrinkables import ParameterShrinkablesGenerator


def check_property(
    name: str,
    parameter_types: Sequence[Any],
    predicate: Callable[..., Any],
    configuration: Optional[PropertyConfiguration] = None,
    registry: Optional[ProviderRegistry] = None,
    reporter: Reporter = NULL_REPORTER,
    with_statistics: bool = False,
) -> PropertyCheckResult:
    """Check ``predicate`` for values generated from ``parameter_types``.

    Args:
        name: Property name for the result
        parameter_types: Classes, typing annotations or descriptors
        predicate: Called with one generated value per parameter type
        configuration: Run configuration; defaults when omitted
        registry: Providers to resolve with; defaults when omitted
        reporter: Sink for report entries
        with_statistics: Pass the run's statistics collector as ``statistics=``

    Returns:
        The run's result

    Raises:
        ConfigurationError: For unsupported parameter types
        CannotResolveArbitrary: If a parameter type cannot be resolved
    """
    configuration = configuration or PropertyConfiguration.defaults(name)
    registry = registry or ProviderRegistry.defaults()
    descriptors = [TypeDescriptor.for_type(parameter_type) for parameter_type in parameter_types]
    generator = ParameterShrinkablesGenerator.for_parameters(descriptors, registry, configuration.tries)
    prop = GenericProperty(name, generator, checked(predicate, with_statistics=with_statistics))
    return prop.check(configuration, reporter)
