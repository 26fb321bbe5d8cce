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
"""propcheck: type-directed property-based testing.

A property states that a predicate holds for all generated inputs. propcheck
resolves the declared parameter types to value generators, runs the predicate
repeatedly with reproducible random values and, on failure, shrinks the
falsifying input to a minimal counterexample.

Key Components:
    - types: Type descriptors and their compatibility relation
    - providers: Resolution of declared types to arbitraries
    - arbitraries: Value generators and combinators
    - shrinking: Shrinkables and the shrinking driver
    - properties: The property state machine, results and statistics

Usage:
    >>> from propcheck import check_property
    >>> check_property("abs is non-negative", [int], lambda n: abs(n) >= 0).status
    <PropertyStatus.SATISFIED: 1>
"""

# Use lazy imports to allow standalone testing of submodules
# Full imports are done on first access via __getattr__


def __getattr__(name: str):
    """Lazy import of module attributes."""
    # Type algebra
    if name in ("TypeDescriptor", "IntRange", "CharRange", "StringLength", "Size", "Scale"):
        from .types import CharRange, IntRange, Scale, Size, StringLength, TypeDescriptor

        return locals()[name]

    # Errors
    if name in (
        "PropcheckError",
        "ConfigurationError",
        "CannotResolveArbitrary",
        "TooManyFilterMisses",
        "AssumptionViolated",
        "PropertyFailure",
    ):
        from .errors import (
            AssumptionViolated,
            CannotResolveArbitrary,
            ConfigurationError,
            PropcheckError,
            PropertyFailure,
            TooManyFilterMisses,
        )

        return locals()[name]

    # Generators
    if name in ("Arbitrary", "Arbitraries", "combine"):
        from .arbitraries import Arbitraries, Arbitrary, combine

        return locals()[name]

    # Resolution
    if name in ("ArbitraryProvider", "ProviderRegistry"):
        from .providers import ArbitraryProvider, ProviderRegistry

        return locals()[name]

    # Shrinking
    if name in ("Shrinkable", "Falsifier", "ShrinkingSequence"):
        from .shrinking import Falsifier, Shrinkable, ShrinkingSequence

        return locals()[name]

    # Properties
    if name in (
        "GenericProperty",
        "PropertyConfiguration",
        "PropertyCheckResult",
        "PropertyStatus",
        "ShrinkingMode",
        "Reporting",
        "StatisticsCollector",
        "LogReporter",
        "CollectingReporter",
        "assume",
        "checked",
        "check_property",
    ):
        from .properties import (
            CollectingReporter,
            GenericProperty,
            LogReporter,
            PropertyCheckResult,
            PropertyConfiguration,
            PropertyStatus,
            Reporting,
            ShrinkingMode,
            StatisticsCollector,
            assume,
            check_property,
            checked,
        )

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Type algebra
    "TypeDescriptor",
    "IntRange",
    "CharRange",
    "StringLength",
    "Size",
    "Scale",
    # Errors
    "PropcheckError",
    "ConfigurationError",
    "CannotResolveArbitrary",
    "TooManyFilterMisses",
    "AssumptionViolated",
    "PropertyFailure",
    # Generators
    "Arbitrary",
    "Arbitraries",
    "combine",
    # Resolution
    "ArbitraryProvider",
    "ProviderRegistry",
    # Shrinking
    "Shrinkable",
    "Falsifier",
    "ShrinkingSequence",
    # Properties
    "GenericProperty",
    "PropertyConfiguration",
    "PropertyCheckResult",
    "PropertyStatus",
    "ShrinkingMode",
    "Reporting",
    "StatisticsCollector",
    "LogReporter",
    "CollectingReporter",
    "assume",
    "checked",
    "check_property",
]
