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
"""Generic shrinking driver.

Starting from a falsifying shrinkable, the driver repeatedly asks the current
value for its candidates and moves to the first one that is strictly simpler
and still falsifies. It stops at the first value with no such candidate.

Sequences are restartable: every iteration starts again from the original
shrinkable and shares no state with earlier iterations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Iterator, Optional, TypeVar

from .falsifier import Falsifier, FalsificationStatus

if TYPE_CHECKING:
    from .shrinkable import Shrinkable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ShrinkResult(Generic[T]):
    """One accepted point of a shrinking sequence.

    Attributes:
        shrinkable: The falsifying shrinkable
        throwable: Exception raised when this value was tested, if any
    """

    shrinkable: Shrinkable[T]
    throwable: Optional[BaseException] = None

    @property
    def value(self) -> T:
        return self.shrinkable.value


class ShrinkingSequence(Generic[T]):
    """Lazily advanced, finite and restartable sequence of shrink steps.

    Example:
        >>> sequence = ShrinkableInteger(50, 1, 100).shrink(
        ...     Falsifier.from_predicate(lambda n: n < 5))
        >>> sequence.run().value
        5
    """

    def __init__(
        self,
        start: Shrinkable[T],
        falsifier: Falsifier[T],
        throwable: Optional[BaseException] = None,
        max_steps: Optional[int] = None,
    ):
        self._start = ShrinkResult(start, throwable)
        self._falsifier = falsifier
        self._max_steps = max_steps
        self._current = self._start
        self._steps: Optional[Iterator[ShrinkResult[T]]] = None

    def with_throwable(self, throwable: Optional[BaseException]) -> ShrinkingSequence[T]:
        """Return a fresh sequence whose start carries ``throwable``."""
        return ShrinkingSequence(self._start.shrinkable, self._falsifier, throwable, self._max_steps)

    def with_max_steps(self, max_steps: Optional[int]) -> ShrinkingSequence[T]:
        return ShrinkingSequence(self._start.shrinkable, self._falsifier, self._start.throwable, max_steps)

    @property
    def current(self) -> ShrinkResult[T]:
        """Best result reached so far by :meth:`next`."""
        return self._current

    def __iter__(self) -> Iterator[ShrinkResult[T]]:
        current = self._start
        steps = 0
        while True:
            if self._max_steps is not None and steps >= self._max_steps:
                logger.warning(f"Shrinking stopped after {steps} steps at {current.value!r}")
                return
            step = self._next_step(current)
            if step is None:
                return
            current = step
            steps += 1
            yield current

    def next(self) -> bool:
        """Advance one step; return False once the fixed point is reached."""
        if self._steps is None:
            self._steps = iter(self)
        step = next(self._steps, None)
        if step is None:
            return False
        self._current = step
        return True

    def run(self, on_step: Optional[Callable[[ShrinkResult[T]], None]] = None) -> ShrinkResult[T]:
        """Drive the sequence to its fixed point.

        Args:
            on_step: Called with every accepted step

        Returns:
            The minimal falsifying result found
        """
        result = self._start
        steps = 0
        for result in self:
            steps += 1
            if on_step is not None:
                on_step(result)
        logger.debug(f"Shrinking finished after {steps} steps")
        return result

    def _next_step(self, current: ShrinkResult[T]) -> Optional[ShrinkResult[T]]:
        distance = current.shrinkable.distance()
        for candidate in current.shrinkable.shrink_candidates():
            if not candidate.distance() < distance:
                continue
            result = self._falsifier(candidate.value)
            if result.status is FalsificationStatus.FALSIFIED:
                return ShrinkResult(candidate, result.throwable)
        return None
