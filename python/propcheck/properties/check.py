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
"""Check outcomes and the adapter from plain predicates.

A checked function returns one of three outcome variants instead of
signalling discards through exceptions:

- ``Kept(satisfied)`` - the try counts as a check
- ``Discarded(reason)`` - an assumption did not hold; counts as a try only
- ``Failed(cause)`` - the check raised; ``AssertionError`` falsifies,
  anything else makes the run erroneous
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence, Union

from ..errors import AssumptionViolated

if TYPE_CHECKING:
    from .statistics import StatisticsCollector

# Exceptions treated as falsification rather than as an erroneous run
FALSIFYING_ERRORS = (AssertionError,)


@dataclass(frozen=True)
class Kept:
    satisfied: bool = True


@dataclass(frozen=True)
class Discarded:
    reason: Any = None


@dataclass(frozen=True)
class Failed:
    cause: BaseException

    @property
    def is_falsifying(self) -> bool:
        return isinstance(self.cause, FALSIFYING_ERRORS)


CheckOutcome = Union[Kept, Discarded, Failed]
CheckedFunction = Callable[[Sequence[Any], "StatisticsCollector"], CheckOutcome]


def assume(condition: Any, reason: Any = None) -> None:
    """Discard the current try unless ``condition`` holds."""
    if not condition:
        raise AssumptionViolated(reason)


def checked(predicate: Callable[..., Any], *, with_statistics: bool = False) -> CheckedFunction:
    """Adapt a plain predicate to a checked function.

    The predicate receives the generated values as positional arguments and,
    with ``with_statistics``, the run's collector as ``statistics=``. Returning
    True or None satisfies the check, False falsifies it.

    Args:
        predicate: The user's property function
        with_statistics: Pass the statistics collector as keyword argument

    Returns:
        The checked function
    """

    def check(parameters: Sequence[Any], statistics: StatisticsCollector) -> CheckOutcome:
        try:
            if with_statistics:
                result = predicate(*parameters, statistics=statistics)
            else:
                result = predicate(*parameters)
        except AssumptionViolated as e:
            return Discarded(e.reason)
        except Exception as e:
            return Failed(e)
        return Kept(result is None or bool(result))

    return check
