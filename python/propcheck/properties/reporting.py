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
"""Report entries and the sinks they are pushed to."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportEntry:
    """Timestamped, ordered key/value pairs.

    Attributes:
        entries: Key/value pairs in publication order
        timestamp: Creation time in seconds since the epoch
    """

    entries: Tuple[Tuple[str, str], ...]
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def of(cls, key: str, value: str) -> ReportEntry:
        return cls(((key, value),))

    def as_dict(self) -> Dict[str, str]:
        return dict(self.entries)

    def get(self, key: str) -> Optional[str]:
        return self.as_dict().get(key)

    def __str__(self) -> str:
        return "\n".join(f"{key} = {value}" for key, value in self.entries)


class Reporter(ABC):
    """Push sink for report entries."""

    @abstractmethod
    def publish(self, entry: ReportEntry) -> None:
        """Publish one entry."""
        pass


class NullReporter(Reporter):
    """Discards all entries."""

    def publish(self, entry: ReportEntry) -> None:
        pass


@dataclass
class LogReporter(Reporter):
    """Publish report entries to the logging system.

    Attributes:
        log_level: Logging level for entries (default: INFO)
    """

    log_level: int = logging.INFO

    def publish(self, entry: ReportEntry) -> None:
        logger.log(self.log_level, f"Property report:\n{entry}")


@dataclass
class CollectingReporter(Reporter):
    """Keep published entries in memory."""

    entries: List[ReportEntry] = field(default_factory=list)

    def publish(self, entry: ReportEntry) -> None:
        self.entries.append(entry)

    def values(self, key: str) -> List[str]:
        """All published values for ``key``, in order."""
        return [value for entry in self.entries for k, value in entry.entries if k == key]


NULL_REPORTER = NullReporter()
