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
"""Property-based tests for the type compatibility algebra.

Uses Hypothesis to check reflexivity, primitive/boxed symmetry and
transitivity of assignability over a pool of descriptors.
"""

from __future__ import annotations

import ctypes
from typing import Generic, TypeVar

import pytest
from hypothesis import given, settings, strategies as st

from propcheck.types.descriptor import TypeDescriptor
from propcheck.types.primitives import PRIMITIVE_TO_BOXED

T = TypeVar("T")


class Animal:
    pass


class Dog(Animal):
    pass


class Puppy(Dog):
    pass


class Box(Generic[T]):
    pass


class IntBox(Box[int]):
    pass


RAW_TYPES = [int, float, bool, str, object, Animal, Dog, Puppy, *PRIMITIVE_TO_BOXED]
CLASS_CHAIN = [object, Animal, Dog, Puppy]


# =============================================================================
# Strategies for generating descriptors
# =============================================================================

@st.composite
def simple_descriptors(draw) -> TypeDescriptor:
    """Descriptors of non-generic classes and primitives."""
    return TypeDescriptor.of(draw(st.sampled_from(RAW_TYPES)))


@st.composite
def descriptors(draw) -> TypeDescriptor:
    """Simple, parameterized, array, variable and wildcard descriptors."""
    kind = draw(st.sampled_from(["simple", "list", "box", "array", "variable", "wildcard"]))
    if kind == "simple":
        return draw(simple_descriptors())
    if kind == "list":
        return TypeDescriptor.of(list, draw(simple_descriptors()))
    if kind == "box":
        return TypeDescriptor.of(Box, draw(simple_descriptors()))
    if kind == "array":
        return TypeDescriptor.array_of(draw(simple_descriptors()))
    bounds = draw(st.lists(st.sampled_from(CLASS_CHAIN).map(TypeDescriptor.of), max_size=2))
    if kind == "variable":
        return TypeDescriptor.type_variable_of("T", *bounds)
    return TypeDescriptor.wildcard(*bounds)


# =============================================================================
# Properties
# =============================================================================


class TestAssignabilityProperties:
    """Algebraic properties of can_be_assigned_to."""

    @given(descriptors())
    @settings(max_examples=200, deadline=None)
    def test_reflexive(self, descriptor: TypeDescriptor) -> None:
        """Every descriptor is assignable to itself."""
        assert descriptor.can_be_assigned_to(descriptor)
        assert descriptor.is_assignable_from(descriptor)

    @given(descriptors())
    @settings(max_examples=200, deadline=None)
    def test_unbounded_wildcard_accepts_everything(self, descriptor: TypeDescriptor) -> None:
        assert TypeDescriptor.wildcard().is_assignable_from(descriptor)

    @given(simple_descriptors(), simple_descriptors(), simple_descriptors())
    @settings(max_examples=300, deadline=None)
    def test_transitive_for_classes(self, a: TypeDescriptor, b: TypeDescriptor, c: TypeDescriptor) -> None:
        if a.raw_type in PRIMITIVE_TO_BOXED or c.raw_type in PRIMITIVE_TO_BOXED:
            # Boxing applies to a single step only
            return
        if a.can_be_assigned_to(b) and b.can_be_assigned_to(c):
            assert a.can_be_assigned_to(c)

    @given(st.sampled_from(sorted(PRIMITIVE_TO_BOXED, key=lambda t: t.__name__)))
    def test_primitive_and_boxed_are_symmetric(self, primitive: type) -> None:
        boxed = TypeDescriptor.of(PRIMITIVE_TO_BOXED[primitive])
        assert TypeDescriptor.of(primitive).can_be_assigned_to(boxed)
        assert boxed.can_be_assigned_to(TypeDescriptor.of(primitive))

    @given(simple_descriptors())
    @settings(max_examples=100, deadline=None)
    def test_unparameterized_subclass_fits_any_arguments(self, argument: TypeDescriptor) -> None:
        """Use sites without type arguments are compatible with every parameterization."""
        assert TypeDescriptor.of(IntBox).can_be_assigned_to(TypeDescriptor.of(Box, argument))
        assert TypeDescriptor.of(IntBox).find_super_type(Box) == TypeDescriptor.of(Box, TypeDescriptor.of(int))


@pytest.mark.parametrize("raw_type", [ctypes.c_int, ctypes.c_double, ctypes.c_wchar])
def test_primitives_are_not_interchangeable(raw_type: type) -> None:
    others = [t for t in PRIMITIVE_TO_BOXED if PRIMITIVE_TO_BOXED[t] is not PRIMITIVE_TO_BOXED[raw_type]]
    for other in others:
        assert not TypeDescriptor.of(raw_type).can_be_assigned_to(TypeDescriptor.of(other))
