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
"""Default providers for builtin scalars, enums and containers."""

from __future__ import annotations

import collections.abc as abc
import ctypes
import enum
import itertools
from typing import Any, List, Optional, Tuple

from ..arbitraries.base import Arbitrary
from ..arbitraries.characters import CharacterArbitrary
from ..arbitraries.combinators import combine
from ..arbitraries.containers import ArrayArbitrary, ListArbitrary, SetArbitrary
from ..arbitraries.numbers import DecimalArbitrary, IntegralArbitrary
from ..arbitraries.samples import ChoiceArbitrary
from ..arbitraries.strings import StringArbitrary
from ..types.descriptor import TypeDescriptor
from ..types.primitives import INTEGRAL_BOUNDS, is_primitive
from .base import ArbitraryProvider, SubtypeProvider

LIST_TYPES = (list, abc.Sequence, abc.MutableSequence, abc.Iterable, abc.Collection)
SET_TYPES = (set, frozenset, abc.Set, abc.MutableSet)

HASHABLE = TypeDescriptor.of(abc.Hashable)


def element_type(target: TypeDescriptor) -> TypeDescriptor:
    """First type argument, or an unbounded wildcard for raw use sites."""
    if target.type_arguments:
        return target.type_arguments[0]
    return TypeDescriptor.wildcard()


def builtin_base(target: TypeDescriptor, bases: Tuple[type, ...]) -> Optional[TypeDescriptor]:
    """Declared builtin container ancestor of a user-defined subclass.

    For ``class Names(list[str])`` and ``bases=(list,)`` this is ``list[str]``.
    Builtins themselves, type variables and non-classes give None.
    """
    raw = target.raw_type
    if target.is_type_variable_or_wildcard() or not isinstance(raw, type) or raw in bases:
        return None
    for base in bases:
        if issubclass(raw, base):
            return target.find_super_type(base)
    return None


# =============================================================================
# Scalars
# =============================================================================


class IntegerProvider:
    """Integers; primitive targets narrow the range to their width."""

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        return target.is_assignable_from(int)

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        bounds = INTEGRAL_BOUNDS.get(target.raw_type, INTEGRAL_BOUNDS[ctypes.c_int])
        return [IntegralArbitrary(*bounds)]


class FloatProvider:
    def can_provide_for(self, target: TypeDescriptor) -> bool:
        return target.is_assignable_from(float)

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        return [DecimalArbitrary()]


class BooleanProvider:
    """Booleans, except where an integer is required."""

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        if target.raw_type is int or target.raw_type in INTEGRAL_BOUNDS:
            return False
        return target.is_assignable_from(bool)

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        return [ChoiceArbitrary((False, True))]


class StringProvider:
    """Strings, for unparameterized use sites only.

    ``str`` is itself a sequence, so parameterized sequence targets such as
    ``Sequence[int]`` are left to the container providers.
    """

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        if is_primitive(target.raw_type) or target.is_generic():
            return False
        return target.is_assignable_from(str)

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        return [StringArbitrary()]


class CharacterProvider:
    def can_provide_for(self, target: TypeDescriptor) -> bool:
        return target.is_of_type(ctypes.c_wchar)

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        return [CharacterArbitrary()]


class EnumProvider:
    def can_provide_for(self, target: TypeDescriptor) -> bool:
        raw = target.raw_type
        return isinstance(raw, enum.EnumMeta) and len(raw) > 0

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        return [ChoiceArbitrary(tuple(target.raw_type))]


# =============================================================================
# Containers
# =============================================================================


class ListProvider:
    """Lists and list subclasses; subclasses are built from the generated list."""

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        if builtin_base(target, (list,)) is not None:
            return True
        return not target.is_type_variable_or_wildcard() and target.raw_type in LIST_TYPES

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        base = builtin_base(target, (list,))
        element = element_type(base or target)
        arbitraries: List[Arbitrary[Any]] = [ListArbitrary(e) for e in subtype_provider(element)]
        if base is not None:
            return [arbitrary.map(target.raw_type) for arbitrary in arbitraries]
        return arbitraries


class SetProvider:
    """Sets, frozensets and their subclasses.

    Element types are additionally bound to Hashable. Subclasses are built
    from the generated set, so their constructor must accept an iterable.
    """

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        if builtin_base(target, (set, frozenset)) is not None:
            return True
        return not target.is_type_variable_or_wildcard() and target.raw_type in SET_TYPES

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        base = builtin_base(target, (set, frozenset))
        element = element_type(base or target)
        if element.is_type_variable_or_wildcard():
            element = TypeDescriptor(
                type_variable=element.type_variable,
                upper_bounds=element.upper_bounds + (HASHABLE,),
                annotations=element.annotations,
            )
        arbitraries: List[Arbitrary[Any]] = [SetArbitrary(e) for e in subtype_provider(element)]
        if base is not None:
            return [arbitrary.map(target.raw_type) for arbitrary in arbitraries]
        if target.is_of_type(frozenset):
            return [arbitrary.map(frozenset) for arbitrary in arbitraries]
        return arbitraries


class ArrayProvider:
    """Homogeneous tuples, including unparameterized ``tuple``."""

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        if target.is_array():
            return True
        return target.is_of_type(tuple) and not target.is_generic()

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        component = target.get_component_type() or TypeDescriptor.wildcard()
        return [ArrayArbitrary(element) for element in subtype_provider(component)]


class TupleProvider:
    """Fixed-length tuples such as ``tuple[int, str]``."""

    def can_provide_for(self, target: TypeDescriptor) -> bool:
        return target.is_of_type(tuple) and target.is_generic() and not target.is_array()

    def provide_for(self, target: TypeDescriptor, subtype_provider: SubtypeProvider) -> List[Arbitrary[Any]]:
        options = [subtype_provider(argument) for argument in target.type_arguments]
        return [
            combine(*components).as_(lambda *values: tuple(values))
            for components in itertools.product(*options)
        ]


def default_providers() -> List[ArbitraryProvider]:
    """Providers registered by ``ProviderRegistry.defaults()``, in scan order."""
    return [
        IntegerProvider(),
        FloatProvider(),
        BooleanProvider(),
        StringProvider(),
        CharacterProvider(),
        EnumProvider(),
        ListProvider(),
        SetProvider(),
        ArrayProvider(),
        TupleProvider(),
    ]
