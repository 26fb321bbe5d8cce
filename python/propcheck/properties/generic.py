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
"""The property state machine.

One call to :meth:`GenericProperty.check` is one run:

    RUNNING -> SATISFIED | FALSIFIED | ERRONEOUS | EXHAUSTED

Each try draws parameters, invokes the checked function and classifies the
outcome. Discarded tries count as tries but not as checks. A falsified try
stops the run and, unless shrinking is off, the falsifying parameters are
shrunk by re-running the same checked function on simpler candidates. An
erroneous try stops the run immediately with the sample as drawn.

Exhaustion is decided once the try budget is used up: no checks at all, or
more discards than ``checks * max_discard_ratio``.
"""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional

from ..shrinking.combined import parameters_shrinkable
from ..shrinking.falsifier import FalsificationResult, Falsifier
from ..shrinking.sequence import ShrinkResult
from ..shrinking.shrinkable import Shrinkable
from .check import CheckedFunction, CheckOutcome, Discarded, Failed, Kept
from .configuration import PropertyConfiguration, Reporting, ShrinkingMode
from .reporting import NULL_REPORTER, ReportEntry, Reporter
from .result import PropertyCheckResult
from .shrinkables import ParameterShrinkablesGenerator
from .statistics import StatisticsCollector

logger = logging.getLogger(__name__)


def fresh_seed() -> str:
    """Draw a new reproducible seed for runs configured without one."""
    return str(random.SystemRandom().getrandbits(63))


def falsification_of(outcome: CheckOutcome) -> FalsificationResult:
    """Classify a check outcome while re-testing shrink candidates.

    Every failure falsifies, whatever exception was raised.
    """
    if isinstance(outcome, Discarded):
        return FalsificationResult.filtered_out()
    if isinstance(outcome, Failed):
        return FalsificationResult.falsified(outcome.cause)
    if outcome.satisfied:
        return FalsificationResult.not_falsified()
    return FalsificationResult.falsified()


class GenericProperty:
    """A property: parameter generation plus a checked function.

    Attributes:
        name: Property name reported in the result
    """

    def __init__(
        self,
        name: str,
        shrinkables_generator: ParameterShrinkablesGenerator,
        check: CheckedFunction,
    ) -> None:
        self.name = name
        self._generator = shrinkables_generator
        self._check = check

    def check(
        self,
        configuration: PropertyConfiguration,
        reporter: Reporter = NULL_REPORTER,
    ) -> PropertyCheckResult:
        """Run the property once.

        Args:
            configuration: Seed, tries, discard ratio, shrinking and reporting
            reporter: Sink for report entries

        Returns:
            The terminal result
        """
        seed = configuration.seed or fresh_seed()
        source = random.Random(seed)
        statistics = StatisticsCollector(configuration.label or self.name)
        self._generator.reset()
        logger.debug(f"Checking property [{self.name}] with seed {seed} and {configuration.tries} tries")
        try:
            result = self._run(configuration, reporter, source, seed, statistics)
        finally:
            entry = statistics.report_entry()
            if entry is not None:
                reporter.publish(entry)
        logger.debug(
            f"Property [{self.name}] {result.status.name} after "
            f"{result.count_tries} tries and {result.count_checks} checks"
        )
        return result

    def _run(
        self,
        configuration: PropertyConfiguration,
        reporter: Reporter,
        source: random.Random,
        seed: str,
        statistics: StatisticsCollector,
    ) -> PropertyCheckResult:
        tries = 0
        checks = 0
        while tries < configuration.tries:
            shrinkables = self._generator.next(source)
            parameters = [shrinkable.value for shrinkable in shrinkables]
            tries += 1
            if configuration.reports(Reporting.GENERATED):
                reporter.publish(ReportEntry.of("generated", repr(tuple(parameters))))

            outcome = self._check(parameters, statistics)
            if isinstance(outcome, Discarded):
                continue
            checks += 1
            if isinstance(outcome, Kept):
                if outcome.satisfied:
                    continue
                return self._falsified(configuration, reporter, seed, tries, checks, shrinkables, None)
            if outcome.is_falsifying:
                return self._falsified(configuration, reporter, seed, tries, checks, shrinkables, outcome.cause)
            return PropertyCheckResult.erroneous(
                self.name, tries, checks, seed, tuple(parameters), outcome.cause
            )

        if checks == 0 or tries - checks > checks * configuration.max_discard_ratio:
            return PropertyCheckResult.exhausted(self.name, tries, checks, seed)
        return PropertyCheckResult.satisfied(self.name, tries, checks, seed)

    def _falsified(
        self,
        configuration: PropertyConfiguration,
        reporter: Reporter,
        seed: str,
        tries: int,
        checks: int,
        shrinkables: List[Shrinkable[Any]],
        throwable: Optional[BaseException],
    ) -> PropertyCheckResult:
        sample = tuple(shrinkable.value for shrinkable in shrinkables)
        if configuration.shrinking_mode is ShrinkingMode.FULL:
            shrunk = self._shrink(configuration, reporter, shrinkables, throwable)
            sample = shrunk.value
            # Unshrunk samples keep the original exception through the sequence start
            throwable = shrunk.throwable
        return PropertyCheckResult.falsified(self.name, tries, checks, seed, sample, throwable)

    def _shrink(
        self,
        configuration: PropertyConfiguration,
        reporter: Reporter,
        shrinkables: List[Shrinkable[Any]],
        throwable: Optional[BaseException],
    ) -> ShrinkResult[Any]:
        # Re-tests during shrinking must not show up in the run's statistics
        scratch = StatisticsCollector(self.name)
        falsifier: Falsifier[Any] = Falsifier(
            lambda parameters: falsification_of(self._check(list(parameters), scratch))
        )

        def report_step(step: ShrinkResult[Any]) -> None:
            reporter.publish(ReportEntry.of("falsified", repr(step.value)))

        on_step = report_step if configuration.reports(Reporting.FALSIFIED) else None
        sequence = parameters_shrinkable(shrinkables).shrink(falsifier).with_throwable(throwable)
        return sequence.run(on_step)
