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
"""Falsifiers: predicates that re-test shrink candidates.

A falsifier classifies a candidate value as still falsifying the property,
not falsifying it, or filtered out. Filtered-out candidates are skipped by
the shrinking driver without being counted as failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class FalsificationStatus(Enum):
    """Outcome of testing one shrink candidate."""

    FALSIFIED = auto()
    NOT_FALSIFIED = auto()
    FILTERED_OUT = auto()


@dataclass(frozen=True, slots=True)
class FalsificationResult:
    """Status of a candidate plus the exception it raised, if any."""

    status: FalsificationStatus
    throwable: Optional[BaseException] = None

    @property
    def is_falsified(self) -> bool:
        return self.status is FalsificationStatus.FALSIFIED

    @staticmethod
    def falsified(throwable: Optional[BaseException] = None) -> FalsificationResult:
        return FalsificationResult(FalsificationStatus.FALSIFIED, throwable)

    @staticmethod
    def not_falsified() -> FalsificationResult:
        return FalsificationResult(FalsificationStatus.NOT_FALSIFIED)

    @staticmethod
    def filtered_out() -> FalsificationResult:
        return FalsificationResult(FalsificationStatus.FILTERED_OUT)


class Falsifier(Generic[T]):
    """Wraps a candidate test and supports filtering and adaptation.

    Example:
        >>> falsifier = Falsifier.from_predicate(lambda n: n < 5)
        >>> falsifier(7).is_falsified
        True
        >>> falsifier.with_filter(lambda n: n % 2 == 0)(7).status
        <FalsificationStatus.FILTERED_OUT: 3>
    """

    def __init__(self, test: Callable[[T], FalsificationResult]):
        self._test = test

    @classmethod
    def from_predicate(cls, predicate: Callable[[T], bool]) -> Falsifier[T]:
        """Falsify when ``predicate`` returns False or raises."""

        def test(value: T) -> FalsificationResult:
            try:
                holds = predicate(value)
            except Exception as e:
                return FalsificationResult.falsified(e)
            if holds:
                return FalsificationResult.not_falsified()
            return FalsificationResult.falsified()

        return cls(test)

    def __call__(self, value: T) -> FalsificationResult:
        return self._test(value)

    def with_filter(self, accept: Callable[[T], bool]) -> Falsifier[T]:
        """Return a falsifier that filters out values ``accept`` rejects.

        Rejected values never reach the wrapped test.
        """

        def test(value: T) -> FalsificationResult:
            if not accept(value):
                return FalsificationResult.filtered_out()
            return self._test(value)

        return Falsifier(test)
