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
"""Configuration of a single property check run."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping, Tuple, Type, TypeVar, Union

from ..errors import ConfigurationError

DEFAULT_TRIES = 1000
DEFAULT_MAX_DISCARD_RATIO = 5

E = TypeVar("E", bound=Enum)


class ShrinkingMode(Enum):
    """Whether falsified samples are shrunk."""

    OFF = auto()  # Report the first falsifying sample as drawn
    FULL = auto()  # Search for a minimal falsifying sample


class Reporting(Enum):
    """Optional report entries published during a run."""

    GENERATED = auto()  # Every generated parameter tuple
    FALSIFIED = auto()  # Every accepted shrinking step


@dataclass(frozen=True)
class PropertyConfiguration:
    """Immutable settings for one check run.

    Attributes:
        label: Property label used in results and logs
        seed: Random seed; empty to draw a fresh one per run
        tries: Number of tries, including discarded ones
        max_discard_ratio: Allowed discards per successful check
        shrinking_mode: Whether to shrink falsified samples
        reporting: Ordered set of report flags
    """

    label: str = ""
    seed: str = ""
    tries: int = DEFAULT_TRIES
    max_discard_ratio: int = DEFAULT_MAX_DISCARD_RATIO
    shrinking_mode: ShrinkingMode = ShrinkingMode.FULL
    reporting: Tuple[Reporting, ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.tries < 1:
            raise ConfigurationError(f"tries must be at least 1, got {self.tries}")
        if self.max_discard_ratio < 0:
            raise ConfigurationError(f"max_discard_ratio must not be negative, got {self.max_discard_ratio}")
        if not isinstance(self.shrinking_mode, ShrinkingMode):
            raise ConfigurationError(f"Invalid shrinking mode [{self.shrinking_mode!r}]")
        reporting = tuple(dict.fromkeys(self.reporting))
        if not all(isinstance(flag, Reporting) for flag in reporting):
            raise ConfigurationError(f"Invalid reporting flags [{self.reporting!r}]")
        object.__setattr__(self, "reporting", reporting)

    @classmethod
    def defaults(cls, label: str = "") -> PropertyConfiguration:
        return cls(label=label)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PropertyConfiguration:
        """Build a configuration from a host configuration source.

        Enum values may be given by name, case-insensitively.

        Args:
            mapping: Keys ``label``, ``seed``, ``tries``, ``max_discard_ratio``,
                ``shrinking`` and ``reporting``

        Raises:
            ConfigurationError: For unknown keys or invalid values
        """
        known = {"label", "seed", "tries", "max_discard_ratio", "shrinking", "reporting"}
        unknown = set(mapping) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

        values: dict = {}
        if "label" in mapping:
            values["label"] = str(mapping["label"])
        if "seed" in mapping:
            values["seed"] = str(mapping["seed"])
        for key in ("tries", "max_discard_ratio"):
            if key in mapping:
                try:
                    values[key] = int(mapping[key])
                except (TypeError, ValueError) as e:
                    raise ConfigurationError(f"{key} must be an integer, got {mapping[key]!r}") from e
        if "shrinking" in mapping:
            values["shrinking_mode"] = _enum_value(ShrinkingMode, mapping["shrinking"])
        if "reporting" in mapping:
            flags = mapping["reporting"]
            if isinstance(flags, (str, Reporting)):
                flags = [flags]
            values["reporting"] = tuple(_enum_value(Reporting, flag) for flag in flags)
        return cls(**values)

    def with_seed(self, seed: Union[str, int]) -> PropertyConfiguration:
        return dataclasses.replace(self, seed=str(seed))

    def with_tries(self, tries: int) -> PropertyConfiguration:
        return dataclasses.replace(self, tries=tries)

    def with_max_discard_ratio(self, max_discard_ratio: int) -> PropertyConfiguration:
        return dataclasses.replace(self, max_discard_ratio=max_discard_ratio)

    def with_shrinking(self, shrinking_mode: ShrinkingMode) -> PropertyConfiguration:
        return dataclasses.replace(self, shrinking_mode=shrinking_mode)

    def with_reporting(self, *reporting: Reporting) -> PropertyConfiguration:
        return dataclasses.replace(self, reporting=tuple(reporting))

    def reports(self, flag: Reporting) -> bool:
        return flag in self.reporting


def _enum_value(enum_class: Type[E], value: Any) -> E:
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class[str(value).upper()]
    except KeyError as e:
        names = ", ".join(member.name for member in enum_class)
        raise ConfigurationError(f"Invalid {enum_class.__name__} [{value!r}], expected one of {names}") from e
