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
"""Run-scoped collection of user-tagged statistics.

A collector is created by the property state machine at the start of every
run, handed to the checked function with each try, and reported once when
the run ends. Nothing is shared between runs.

Example:
    >>> def even_or_odd(n, statistics):
    ...     statistics.collect("even" if n % 2 == 0 else "odd")
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..errors import ConfigurationError
from .reporting import ReportEntry

STATISTICS_KEY = "collected statistics"


class StatisticsCollector:
    """Counts how often each tuple of collected values occurs.

    Attributes:
        label: Label of the run the statistics belong to
    """

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._counts: Dict[Tuple[Any, ...], int] = {}
        self._arity: Optional[int] = None

    def collect(self, *values: Any) -> None:
        """Count one occurrence of the given values.

        Raises:
            ConfigurationError: If no values are given, or if the number of
                values differs from earlier calls in the same run
        """
        if not values:
            raise ConfigurationError("collect() requires at least one value")
        if self._arity is None:
            self._arity = len(values)
        elif self._arity != len(values):
            raise ConfigurationError(
                f"collect() must always be called with {self._arity} values, got {len(values)}"
            )
        self._counts[values] = self._counts.get(values, 0) + 1

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def is_empty(self) -> bool:
        return not self._counts

    def count(self, *values: Any) -> int:
        return self._counts.get(values, 0)

    def percentage(self, *values: Any) -> float:
        if not self._counts:
            return 0.0
        return 100.0 * self.count(*values) / self.total

    def entries(self) -> List[Tuple[Tuple[Any, ...], int]]:
        """Collected value tuples with counts, most frequent first."""
        return sorted(self._counts.items(), key=lambda item: -item[1])

    def report_entry(self) -> Optional[ReportEntry]:
        """Render the tally, or None if nothing was collected."""
        if not self._counts:
            return None
        keys = [(" ".join(str(value) for value in values), count) for values, count in self.entries()]
        width = max(len(key) for key, _ in keys)
        lines = [f"    {key:<{width}} : {100.0 * count / self.total:.0f} %" for key, count in keys]
        return ReportEntry.of(STATISTICS_KEY, "\n" + "\n".join(lines))
