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
"""Outcome of a property check run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Tuple

from ..errors import PropertyFailure


class PropertyStatus(Enum):
    """Terminal states of the property state machine."""

    SATISFIED = auto()
    FALSIFIED = auto()
    ERRONEOUS = auto()
    EXHAUSTED = auto()


@dataclass(frozen=True)
class PropertyCheckResult:
    """Immutable result of one check run.

    Attributes:
        property_name: Name of the checked property
        status: Terminal status
        count_tries: Tries performed, including discarded ones
        count_checks: Tries that were not discarded
        random_seed: Seed actually used; rerun with it to reproduce
        throwable: Exception raised by the check, if any
        sample: Falsifying parameter values, shrunk unless shrinking is off
    """

    property_name: str
    status: PropertyStatus
    count_tries: int
    count_checks: int
    random_seed: str
    throwable: Optional[BaseException] = None
    sample: Optional[Tuple[Any, ...]] = None

    @staticmethod
    def satisfied(name: str, tries: int, checks: int, seed: str) -> PropertyCheckResult:
        return PropertyCheckResult(name, PropertyStatus.SATISFIED, tries, checks, seed)

    @staticmethod
    def exhausted(name: str, tries: int, checks: int, seed: str) -> PropertyCheckResult:
        return PropertyCheckResult(name, PropertyStatus.EXHAUSTED, tries, checks, seed)

    @staticmethod
    def falsified(
        name: str,
        tries: int,
        checks: int,
        seed: str,
        sample: Tuple[Any, ...],
        throwable: Optional[BaseException] = None,
    ) -> PropertyCheckResult:
        return PropertyCheckResult(name, PropertyStatus.FALSIFIED, tries, checks, seed, throwable, sample)

    @staticmethod
    def erroneous(
        name: str,
        tries: int,
        checks: int,
        seed: str,
        sample: Tuple[Any, ...],
        throwable: BaseException,
    ) -> PropertyCheckResult:
        return PropertyCheckResult(name, PropertyStatus.ERRONEOUS, tries, checks, seed, throwable, sample)

    @property
    def is_successful(self) -> bool:
        return self.status is PropertyStatus.SATISFIED

    def ensure_successful(self) -> PropertyCheckResult:
        """Return self if satisfied.

        Raises:
            PropertyFailure: For falsified, erroneous and exhausted results,
                chained to the captured exception
        """
        if self.is_successful:
            return self
        raise PropertyFailure(self) from self.throwable

    def __str__(self) -> str:
        lines = [
            f"Property [{self.property_name}] {self.status.name}",
            f"  tries = {self.count_tries}, checks = {self.count_checks}, seed = {self.random_seed}",
        ]
        if self.sample is not None:
            lines.append(f"  sample = {self.sample!r}")
        if self.throwable is not None:
            lines.append(f"  error = {type(self.throwable).__name__}: {self.throwable}")
        return "\n".join(lines)
