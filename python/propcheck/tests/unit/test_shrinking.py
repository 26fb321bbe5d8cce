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
"""Unit tests for shrinkables, falsifiers and the shrinking driver."""

from typing import List

import pytest

from propcheck.errors import ConfigurationError
from propcheck.shrinking.combined import CombinedShrinkable, parameters_shrinkable
from propcheck.shrinking.containers import ShrinkableList, ShrinkableSet, ShrinkableString
from propcheck.shrinking.distance import ShrinkingDistance
from propcheck.shrinking.falsifier import FalsificationResult, FalsificationStatus, Falsifier
from propcheck.shrinking.numeric import (
    ShrinkableInteger,
    ShrinkableSample,
    default_shrink_target,
    shrink_values_towards,
)
from propcheck.shrinking.shrinkable import Unshrinkable


def integers(*values: int, min_value: int = 0, max_value: int = 100) -> List[ShrinkableInteger]:
    return [ShrinkableInteger(v, min_value, max_value) for v in values]


def falsified_when(condition) -> Falsifier:
    """Falsifier whose candidates falsify when ``condition`` holds."""
    return Falsifier.from_predicate(lambda value: not condition(value))


class TestDistance:
    """Tests for ShrinkingDistance."""

    def test_lexicographic_order(self) -> None:
        assert ShrinkingDistance.of(1, 0) < ShrinkingDistance.of(1, 1) < ShrinkingDistance.of(2, 0)

    def test_concat_and_total(self) -> None:
        distance = ShrinkingDistance.concat([ShrinkingDistance.of(1), ShrinkingDistance.of(2, 3)])
        assert distance == ShrinkingDistance.of(1, 2, 3)
        assert distance.total() == 6

    def test_negative_dimensions(self) -> None:
        with pytest.raises(ValueError):
            ShrinkingDistance.of(-1)


class TestFalsifier:
    """Tests for falsifiers."""

    def test_predicate_result(self) -> None:
        falsifier = Falsifier.from_predicate(lambda n: n < 5)
        assert falsifier(7).is_falsified
        assert falsifier(3).status is FalsificationStatus.NOT_FALSIFIED

    def test_exception_falsifies(self) -> None:
        error = ValueError("boom")

        def predicate(n: int) -> bool:
            raise error

        result = Falsifier.from_predicate(predicate)(1)
        assert result.is_falsified
        assert result.throwable is error

    def test_filter_skips_test(self) -> None:
        """Filtered values never reach the wrapped test."""
        tested: List[int] = []

        def test(n: int) -> FalsificationResult:
            tested.append(n)
            return FalsificationResult.falsified()

        falsifier = Falsifier(test).with_filter(lambda n: n % 2 == 0)
        assert falsifier(3).status is FalsificationStatus.FILTERED_OUT
        assert falsifier(4).is_falsified
        assert tested == [4]


class TestIntegers:
    """Tests for integer shrinking."""

    def test_candidates_towards_target(self) -> None:
        assert list(shrink_values_towards(50, 1)) == [1, 26, 38, 44, 47, 49]
        assert list(shrink_values_towards(-10, 0)) == [0, -5, -8, -9]
        assert list(shrink_values_towards(7, 7)) == []

    def test_default_target(self) -> None:
        assert default_shrink_target(-5, 5) == 0
        assert default_shrink_target(1, 100) == 1
        assert default_shrink_target(-100, -1) == -1

    def test_target_out_of_range(self) -> None:
        with pytest.raises(ConfigurationError):
            ShrinkableInteger(5, 0, 10, target=11)

    def test_shrinks_to_boundary(self) -> None:
        sequence = ShrinkableInteger(50, 1, 100).shrink(Falsifier.from_predicate(lambda n: n < 5))
        assert sequence.run().value == 5

    def test_shrinks_negative_values(self) -> None:
        sequence = ShrinkableInteger(-80, -100, 100).shrink(falsified_when(lambda n: n <= -10))
        assert sequence.run().value == -10

    def test_unfalsifiable_candidates_keep_value(self) -> None:
        sequence = ShrinkableInteger(50, 0, 100).shrink(falsified_when(lambda n: n == 50))
        assert sequence.run().value == 50


class TestSequence:
    """Tests for the shrinking driver."""

    def test_steps_strictly_decrease(self) -> None:
        steps = list(ShrinkableInteger(90, 0, 100).shrink(falsified_when(lambda n: n >= 3)))
        distances = [step.shrinkable.distance() for step in steps]
        assert distances == sorted(distances, reverse=True)
        assert len(set(distances)) == len(distances)
        assert steps[-1].value == 3

    def test_restartable(self) -> None:
        sequence = ShrinkableInteger(90, 0, 100).shrink(falsified_when(lambda n: n >= 3))
        assert [s.value for s in sequence] == [s.value for s in sequence]

    def test_next_advances(self) -> None:
        sequence = ShrinkableInteger(8, 0, 100).shrink(falsified_when(lambda n: n >= 7))
        assert sequence.current.value == 8
        assert sequence.next()
        assert sequence.current.value == 7
        assert not sequence.next()
        assert sequence.current.value == 7

    def test_on_step(self) -> None:
        seen: List[int] = []
        result = ShrinkableInteger(50, 1, 100).shrink(Falsifier.from_predicate(lambda n: n < 5)).run(
            lambda step: seen.append(step.value)
        )
        assert seen[-1] == result.value == 5

    def test_max_steps(self) -> None:
        sequence = ShrinkableInteger(50, 1, 100).shrink(Falsifier.from_predicate(lambda n: n < 5))
        assert sequence.with_max_steps(1).run().value == 26

    def test_throwable_of_last_step(self) -> None:
        def predicate(n: int) -> bool:
            if n >= 5:
                raise AssertionError(str(n))
            return True

        sequence = ShrinkableInteger(50, 1, 100).shrink(Falsifier.from_predicate(predicate))
        result = sequence.run()
        assert str(result.throwable) == "5"

    def test_unshrinkable(self) -> None:
        sequence = Unshrinkable("x").shrink(falsified_when(lambda v: True))
        result = sequence.with_throwable(KeyError("k")).run()
        assert result.value == "x"
        assert isinstance(result.throwable, KeyError)


class TestSamples:
    """Tests for sampled values."""

    def test_shrinks_towards_first_sample(self) -> None:
        sample = ShrinkableSample(("a", "b", "c", "d"), 3)
        assert [c.value for c in sample.shrink_candidates()] == ["a", "b", "c"]
        assert sample.shrink(falsified_when(lambda v: v != "a")).run().value == "b"


class TestContainers:
    """Tests for container shrinking."""

    def test_list_removes_then_shrinks_elements(self) -> None:
        shrinkable = ShrinkableList(integers(5, 3, 8))
        result = shrinkable.shrink(falsified_when(lambda xs: len(xs) >= 2)).run()
        assert result.value == [0, 0]

    def test_list_shrinks_to_relevant_element(self) -> None:
        shrinkable = ShrinkableList(integers(1, 2, 60, 4))
        result = shrinkable.shrink(falsified_when(lambda xs: any(x >= 10 for x in xs))).run()
        assert result.value == [10]

    def test_list_floor(self) -> None:
        shrinkable = ShrinkableList(integers(1, 2, 3, 4), min_size=2)
        assert all(len(c.value) >= 2 for c in shrinkable.shrink_candidates())
        assert shrinkable.shrink(falsified_when(lambda xs: True)).run().value == [0, 0]

    def test_set_floor(self) -> None:
        """Sets never shrink below their minimum size, even transiently."""
        sizes: List[int] = []

        def always_falsified(value) -> FalsificationResult:
            sizes.append(len(value))
            return FalsificationResult.falsified()

        shrinkable = ShrinkableSet(integers(10, 20, 30, 40), min_size=2)
        result = shrinkable.shrink(Falsifier(always_falsified)).run()
        assert result.value == {0, 1}
        assert min(sizes) >= 2

    def test_set_collapses_duplicates(self) -> None:
        shrinkable = ShrinkableSet(integers(3, 3, 4))
        assert shrinkable.value == {3, 4}
        assert len(shrinkable.elements) == 2

    def test_string(self) -> None:
        chars = [ShrinkableInteger(ord(c), ord("a"), ord("z")).map(chr) for c in "hello"]
        shrinkable = ShrinkableString(chars)
        assert shrinkable.value == "hello"
        result = shrinkable.shrink(falsified_when(lambda s: "l" in s)).run()
        assert result.value == "l"


class TestCombined:
    """Tests for combined shrinkables."""

    def test_parts_shrink_independently(self) -> None:
        shrinkable = CombinedShrinkable(integers(40, 60), tuple)
        result = shrinkable.shrink(falsified_when(lambda t: t[0] + t[1] >= 50)).run()
        assert result.value == (0, 50)

    def test_accept_filter(self) -> None:
        shrinkable = CombinedShrinkable(integers(40, 60), tuple, accept=lambda v: v[0] < v[1])
        assert all(c.value[0] < c.value[1] for c in shrinkable.shrink_candidates())

    def test_parameters(self) -> None:
        shrinkable = parameters_shrinkable(integers(9, 9))
        assert shrinkable.value == (9, 9)
        assert parameters_shrinkable([]).value == ()
        assert list(parameters_shrinkable([]).shrink_candidates()) == []

    def test_mapped(self) -> None:
        shrinkable = ShrinkableInteger(10, 0, 100).map(str)
        assert shrinkable.value == "10"
        assert shrinkable.shrink(falsified_when(lambda s: int(s) >= 5)).run().value == "5"

    def test_filtered(self) -> None:
        shrinkable = ShrinkableInteger(40, 0, 100).filter(lambda n: n % 2 == 0)
        assert all(c.value % 2 == 0 for c in shrinkable.shrink_candidates())
