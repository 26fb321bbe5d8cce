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
"""Unit tests for property configuration and results."""

import dataclasses

import pytest

from propcheck.errors import ConfigurationError, PropertyFailure
from propcheck.properties.configuration import PropertyConfiguration, Reporting, ShrinkingMode
from propcheck.properties.result import PropertyCheckResult, PropertyStatus


class TestPropertyConfiguration:
    """Tests for PropertyConfiguration."""

    def test_defaults(self) -> None:
        config = PropertyConfiguration.defaults("label")
        assert config.label == "label"
        assert config.seed == ""
        assert config.tries == 1000
        assert config.max_discard_ratio == 5
        assert config.shrinking_mode is ShrinkingMode.FULL
        assert config.reporting == ()

    def test_immutable(self) -> None:
        config = PropertyConfiguration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tries = 5  # type: ignore[misc]

    def test_with_methods_copy(self) -> None:
        config = PropertyConfiguration()
        changed = config.with_seed(42).with_tries(10).with_max_discard_ratio(0).with_shrinking(ShrinkingMode.OFF)
        assert changed.seed == "42"
        assert changed.tries == 10
        assert changed.max_discard_ratio == 0
        assert changed.shrinking_mode is ShrinkingMode.OFF
        assert config == PropertyConfiguration()

    def test_reporting_is_ordered_set(self) -> None:
        config = PropertyConfiguration().with_reporting(Reporting.FALSIFIED, Reporting.GENERATED, Reporting.FALSIFIED)
        assert config.reporting == (Reporting.FALSIFIED, Reporting.GENERATED)
        assert config.reports(Reporting.GENERATED)
        assert not PropertyConfiguration().reports(Reporting.GENERATED)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tries": 0},
            {"max_discard_ratio": -1},
            {"shrinking_mode": "FULL"},
            {"reporting": ("GENERATED",)},
        ],
    )
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(ConfigurationError):
            PropertyConfiguration(**kwargs)


class TestFromMapping:
    """Tests for building configurations from host settings."""

    def test_all_keys(self) -> None:
        config = PropertyConfiguration.from_mapping(
            {
                "label": "prop",
                "seed": 7,
                "tries": "50",
                "max_discard_ratio": 3,
                "shrinking": "off",
                "reporting": ["generated", "Falsified"],
            }
        )
        assert config == PropertyConfiguration(
            label="prop",
            seed="7",
            tries=50,
            max_discard_ratio=3,
            shrinking_mode=ShrinkingMode.OFF,
            reporting=(Reporting.GENERATED, Reporting.FALSIFIED),
        )

    def test_single_reporting_flag(self) -> None:
        config = PropertyConfiguration.from_mapping({"reporting": "falsified"})
        assert config.reporting == (Reporting.FALSIFIED,)

    def test_empty_mapping(self) -> None:
        assert PropertyConfiguration.from_mapping({}) == PropertyConfiguration()

    @pytest.mark.parametrize(
        "mapping",
        [
            {"retries": 10},
            {"tries": "many"},
            {"shrinking": "partial"},
            {"reporting": ["everything"]},
        ],
    )
    def test_invalid_mapping(self, mapping) -> None:
        with pytest.raises(ConfigurationError):
            PropertyConfiguration.from_mapping(mapping)


class TestPropertyCheckResult:
    """Tests for PropertyCheckResult."""

    def test_factories(self) -> None:
        assert PropertyCheckResult.satisfied("p", 10, 8, "1").status is PropertyStatus.SATISFIED
        assert PropertyCheckResult.exhausted("p", 10, 0, "1").status is PropertyStatus.EXHAUSTED
        falsified = PropertyCheckResult.falsified("p", 3, 3, "1", (5,))
        assert falsified.sample == (5,)
        assert falsified.throwable is None
        error = RuntimeError("boom")
        erroneous = PropertyCheckResult.erroneous("p", 2, 2, "1", (1,), error)
        assert erroneous.throwable is error
        assert not erroneous.is_successful

    def test_exhausted_raises(self) -> None:
        result = PropertyCheckResult.exhausted("p", 10, 0, "1")
        with pytest.raises(PropertyFailure) as info:
            result.ensure_successful()
        assert info.value.__cause__ is None

    def test_str(self) -> None:
        text = str(PropertyCheckResult.erroneous("p", 2, 2, "99", (1, "a"), KeyError("k")))
        assert "Property [p] ERRONEOUS" in text
        assert "tries = 2, checks = 2, seed = 99" in text
        assert "sample = (1, 'a')" in text
        assert "KeyError" in text
