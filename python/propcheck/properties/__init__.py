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
"""Property state machine, configuration, results and statistics."""

from .check import (
    CheckedFunction,
    CheckOutcome,
    Discarded,
    Failed,
    Kept,
    assume,
    checked,
)
from .configuration import PropertyConfiguration, Reporting, ShrinkingMode
from .generic import GenericProperty
from .reporting import (
    NULL_REPORTER,
    CollectingReporter,
    LogReporter,
    Reporter,
    ReportEntry,
)
from .result import PropertyCheckResult, PropertyStatus
from .runner import check_property
from .shrinkables import ParameterShrinkablesGenerator
from .statistics import STATISTICS_KEY, StatisticsCollector

__all__ = [
    # Checks
    "Kept",
    "Discarded",
    "Failed",
    "CheckOutcome",
    "CheckedFunction",
    "assume",
    "checked",
    # Configuration
    "PropertyConfiguration",
    "ShrinkingMode",
    "Reporting",
    # Execution
    "GenericProperty",
    "ParameterShrinkablesGenerator",
    "check_property",
    # Results
    "PropertyCheckResult",
    "PropertyStatus",
    # Reporting and statistics
    "ReportEntry",
    "Reporter",
    "LogReporter",
    "CollectingReporter",
    "NULL_REPORTER",
    "StatisticsCollector",
    "STATISTICS_KEY",
]
