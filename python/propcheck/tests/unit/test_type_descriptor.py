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
"""Unit tests for type descriptors and their compatibility relation."""

import collections.abc as abc
import ctypes
import numbers
import typing
from typing import Annotated, Any, Generic, TypeVar

import pytest

from propcheck.errors import ConfigurationError
from propcheck.types.descriptor import OBJECT, TypeDescriptor, declared_arity
from propcheck.types.hints import IntRange

T = TypeVar("T")


class Box(Generic[T]):
    pass


class IntBox(Box[int]):
    pass


class SpecialIntBox(IntBox):
    pass


class Names(list[str]):
    pass


class Animal:
    pass


class Pet:
    pass


class Dog(Animal, Pet):
    pass


class Cat(Animal):
    pass


class Left(Box[int]):
    pass


class Right(Box[str]):
    pass


class Both(Left, Right):
    pass


def of(raw, *args) -> TypeDescriptor:
    return TypeDescriptor.of(raw, *args)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for building descriptors."""

    def test_of_accepts_matching_arity(self) -> None:
        """of() accepts as many arguments as the raw type declares."""
        descriptor = of(dict, str, int)
        assert descriptor.raw_type is dict
        assert descriptor.type_arguments == (of(str), of(int))

    def test_of_rejects_arity_mismatch(self) -> None:
        """of() fails fast when the argument count does not match."""
        with pytest.raises(ConfigurationError, match="cannot have type parameters"):
            of(list, int, str)

    def test_of_rejects_arguments_for_plain_class(self) -> None:
        """Non-generic classes accept no type arguments."""
        with pytest.raises(ConfigurationError):
            of(int, str)

    def test_of_uses_generic_parameters(self) -> None:
        """User generics declare their arity through typing.Generic."""
        assert declared_arity(Box) == 1
        assert of(Box, int).type_arguments == (of(int),)
        with pytest.raises(ConfigurationError):
            of(Box, int, str)

    def test_tuple_is_variadic(self) -> None:
        """tuple accepts any number of type arguments."""
        assert len(of(tuple, int, str, float).type_arguments) == 3

    def test_type_variable_defaults_to_object_bound(self) -> None:
        """Unbounded variables get the universal top type as bound."""
        variable = TypeDescriptor.type_variable_of("T")
        assert variable.raw_type is object
        assert variable.upper_bounds == (OBJECT,)
        assert variable.is_type_variable()
        assert not variable.is_wildcard()

    def test_wildcard(self) -> None:
        wildcard = TypeDescriptor.wildcard()
        assert wildcard.is_wildcard()
        assert not wildcard.is_type_variable()
        assert str(wildcard) == "?"

    def test_invalid_type_variable_name(self) -> None:
        with pytest.raises(ConfigurationError):
            TypeDescriptor.type_variable_of("?")

    def test_unhashable_annotations_are_rejected(self) -> None:
        """Annotations must be hashable to key generator caches."""
        with pytest.raises(ConfigurationError, match="hashable"):
            of(int).with_annotations({"min": 1})

    def test_descriptors_are_values(self) -> None:
        """Equal descriptors hash equally."""
        cache = {of(list, int): "ints"}
        assert cache[of(list, int)] == "ints"


class TestForType:
    """Tests for converting typing annotations."""

    def test_builtin_generic(self) -> None:
        assert TypeDescriptor.for_type(list[int]) == of(list, int)
        assert TypeDescriptor.for_type(typing.List[int]) == of(list, int)
        assert TypeDescriptor.for_type(typing.Dict[str, int]) == of(dict, str, int)

    def test_unparameterized_alias(self) -> None:
        assert TypeDescriptor.for_type(typing.List) == of(list)

    def test_homogeneous_tuple_is_array(self) -> None:
        descriptor = TypeDescriptor.for_type(tuple[int, ...])
        assert descriptor.is_array()
        assert descriptor.get_component_type() == of(int)

    def test_fixed_tuple_is_not_array(self) -> None:
        descriptor = TypeDescriptor.for_type(tuple[int, str])
        assert not descriptor.is_array()
        assert descriptor.get_component_type() is None

    def test_any_is_wildcard(self) -> None:
        assert TypeDescriptor.for_type(Any).is_wildcard()

    def test_type_var_bound(self) -> None:
        N = TypeVar("N", bound=numbers.Integral)
        descriptor = TypeDescriptor.for_type(N)
        assert descriptor.type_variable == "N"
        assert descriptor.upper_bounds == (of(numbers.Integral),)
        assert descriptor.has_bounds()

    def test_annotated_attaches_hints(self) -> None:
        descriptor = TypeDescriptor.for_type(Annotated[int, IntRange(1, 5)])
        assert descriptor.raw_type is int
        assert descriptor.get_annotation(IntRange) == IntRange(1, 5)
        assert descriptor.get_annotation(str) is None

    def test_none(self) -> None:
        assert TypeDescriptor.for_type(None).raw_type is type(None)

    @pytest.mark.parametrize("annotation", [int | str, typing.Union[int, str], typing.Optional[int]])
    def test_unions_are_unsupported(self, annotation) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported"):
            TypeDescriptor.for_type(annotation)


# =============================================================================
# Compatibility
# =============================================================================


class TestCompatibility:
    """Tests for can_be_assigned_to."""

    def test_same_type(self) -> None:
        assert of(int).can_be_assigned_to(of(int))

    def test_subclass(self) -> None:
        assert of(Dog).can_be_assigned_to(of(Animal))
        assert not of(Animal).can_be_assigned_to(of(Dog))

    def test_unparameterized_use_sites_are_compatible(self) -> None:
        """Zero type arguments on either side is accepted."""
        assert of(list, int).can_be_assigned_to(of(list))
        assert of(list).can_be_assigned_to(of(list, int))

    def test_type_arguments_must_match(self) -> None:
        assert not of(list, int).can_be_assigned_to(of(list, str))
        assert of(list, Dog).can_be_assigned_to(of(list, Animal))

    def test_abstract_supertype(self) -> None:
        assert of(list, int).can_be_assigned_to(of(abc.Sequence, int))
        assert not of(dict, str, int).can_be_assigned_to(of(list))

    def test_differing_argument_counts_are_compatible(self) -> None:
        assert of(tuple, int, str).can_be_assigned_to(TypeDescriptor.array_of(int))

    def test_unbounded_wildcard_accepts_everything(self) -> None:
        wildcard = TypeDescriptor.wildcard()
        for descriptor in (of(int), of(list, str), TypeDescriptor.type_variable_of("T")):
            assert descriptor.can_be_assigned_to(wildcard)

    def test_bounded_type_variable(self) -> None:
        variable = TypeDescriptor.type_variable_of("N", numbers.Number)
        assert of(int).can_be_assigned_to(variable)
        assert of(float).can_be_assigned_to(variable)
        assert not of(str).can_be_assigned_to(variable)

    def test_all_bounds_must_be_satisfied(self) -> None:
        variable = TypeDescriptor.type_variable_of("T", Animal, Pet)
        assert of(Dog).can_be_assigned_to(variable)
        assert not of(Cat).can_be_assigned_to(variable)

    def test_variable_to_variable(self) -> None:
        both = TypeDescriptor.type_variable_of("T", Animal, Pet)
        animal = TypeDescriptor.type_variable_of("U", Animal)
        assert both.can_be_assigned_to(animal)
        assert not animal.can_be_assigned_to(both)

    def test_multi_bound_variable_is_reflexive(self) -> None:
        both = TypeDescriptor.type_variable_of("T", Animal, Pet)
        assert both.can_be_assigned_to(both)

    def test_variable_is_not_assignable_to_concrete_type(self) -> None:
        assert not TypeDescriptor.type_variable_of("T").can_be_assigned_to(of(int))

    @pytest.mark.parametrize(
        "primitive, boxed",
        [
            (ctypes.c_int, int),
            (ctypes.c_long, int),
            (ctypes.c_short, int),
            (ctypes.c_byte, int),
            (ctypes.c_double, float),
            (ctypes.c_float, float),
            (ctypes.c_bool, bool),
            (ctypes.c_wchar, str),
        ],
    )
    def test_primitive_boxed_pairs(self, primitive, boxed) -> None:
        """Primitive and boxed types are compatible in both directions."""
        assert of(primitive).can_be_assigned_to(of(boxed))
        assert of(boxed).can_be_assigned_to(of(primitive))

    def test_primitive_of_other_kind(self) -> None:
        assert not of(ctypes.c_int).can_be_assigned_to(of(float))
        assert not of(float).can_be_assigned_to(of(ctypes.c_int))

    def test_is_assignable_from(self) -> None:
        assert of(numbers.Number).is_assignable_from(int)
        assert not of(int).is_assignable_from(str)


# =============================================================================
# Queries
# =============================================================================


class TestQueries:
    """Tests for bounds, components and supertypes."""

    def test_has_bounds(self) -> None:
        assert not TypeDescriptor.type_variable_of("T").has_bounds()
        assert not TypeDescriptor.wildcard(object).has_bounds()
        assert TypeDescriptor.wildcard(int).has_bounds()
        assert TypeDescriptor.type_variable_of("T", object, object).has_bounds()

    def test_component_type(self) -> None:
        assert TypeDescriptor.array_of(int).get_component_type() == of(int)
        assert of(list, int).get_component_type() is None

    def test_find_super_type_of_builtin_base(self) -> None:
        assert of(Names).find_super_type(list) == of(list, str)

    def test_find_super_type_carries_ancestor_arguments(self) -> None:
        assert of(SpecialIntBox).find_super_type(Box) == of(Box, int)

    def test_find_super_type_depth_first(self) -> None:
        """The first base's ancestors are searched before the second base's."""
        assert of(Both).find_super_type(Box) == of(Box, int)

    def test_find_super_type_missing(self) -> None:
        assert of(Dog).find_super_type(list) is None

    def test_find_super_type_self(self) -> None:
        assert of(list, int).find_super_type(list) == of(list, int)

    def test_str(self) -> None:
        assert str(of(list, int)) == "list[int]"
        assert str(TypeDescriptor.array_of(int)) == "tuple[int, ...]"
        assert str(TypeDescriptor.type_variable_of("T", abc.Sized)) == "T extends Sized"
        assert str(TypeDescriptor.type_variable_of("T", Animal, Pet)) == "T extends Animal & Pet"
