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
"""Exception hierarchy for propcheck.

Configuration and resolution errors fail fast, before any try of a
property is attempted. Exceptions raised by a user's predicate are never
wrapped: they are captured verbatim in the property's result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .types.descriptor import TypeDescriptor


class PropcheckError(Exception):
    """Base class for all errors raised by propcheck itself."""

    pass


class ConfigurationError(PropcheckError, ValueError):
    """Invalid configuration detected while building descriptors or arbitraries.

    Raised for type-argument arity mismatches, inverted ranges (min > max),
    invalid hints and invalid property configuration values.
    """

    pass


class CannotResolveArbitrary(PropcheckError):
    """No registered provider can produce values for a declared type.

    Attributes:
        descriptor: The type that could not be resolved
    """

    def __init__(self, descriptor: TypeDescriptor, message: Optional[str] = None):
        self.descriptor = descriptor
        super().__init__(message or f"Cannot find an arbitrary for type [{descriptor}]")


class TooManyFilterMisses(PropcheckError):
    """A filtered generator could not find an acceptable value.

    Attributes:
        misses: Number of consecutive rejected draws
    """

    def __init__(self, misses: int, what: str = "values"):
        self.misses = misses
        super().__init__(f"Filter missed {misses} times in a row while generating {what}")


class AssumptionViolated(PropcheckError):
    """Raised by :func:`propcheck.properties.check.assume` to discard a try.

    Never escapes a property run: the check adapter turns it into a
    ``Discarded`` outcome.
    """

    def __init__(self, reason: Any = None):
        self.reason = reason
        super().__init__("Assumption violated" if reason is None else str(reason))


class PropertyFailure(PropcheckError, AssertionError):
    """Raised by ``PropertyCheckResult.ensure_successful`` for failed runs.

    Attributes:
        result: The unsuccessful property check result
    """

    def __init__(self, result: Any):
        self.result = result
        super().__init__(str(result))
