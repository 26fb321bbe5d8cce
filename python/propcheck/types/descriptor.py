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
"""Structural type descriptors and their compatibility relation.

A TypeDescriptor describes a declared parameter type: a raw class, its type
arguments, and for type variables and wildcards the list of upper bounds.
Descriptors are built once, from classes or typing annotations, and never
consult the live reflection API afterwards.

The central operation is ``can_be_assigned_to``, which decides whether values
described by one descriptor are acceptable where another is required:

- Type variables and wildcards accept any descriptor satisfying all of
  their upper bounds
- Otherwise the target's raw class must be a superclass of the provided raw
  class, and type arguments must be pairwise compatible. Unparameterized
  use sites and argument lists of differing length are accepted
- Primitive/boxed pairs (see :mod:`propcheck.types.primitives`) are
  compatible in both directions

The relation is deliberately permissive for unparameterized use sites. It is
a matching heuristic for generator resolution, not a soundness guarantee.

Example:
    >>> ints = TypeDescriptor.of(list, int)
    >>> ints.can_be_assigned_to(TypeDescriptor.of(list))
    True
    >>> ints.can_be_assigned_to(TypeDescriptor.of(list, TypeDescriptor.wildcard()))
    True
"""

from __future__ import annotations

import collections
import collections.abc as abc
import dataclasses
import types
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Dict,
    Generic,
    List,
    Literal,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from ..errors import ConfigurationError
from .primitives import boxed_type_matches

WILDCARD = "?"

# Arity of parameterizable classes that do not expose ``__parameters__``.
# ``None`` marks variadic classes.
_DECLARED_ARITY: Dict[type, Optional[int]] = {
    list: 1,
    set: 1,
    frozenset: 1,
    dict: 2,
    type: 1,
    tuple: None,
    collections.deque: 1,
    collections.defaultdict: 2,
    collections.OrderedDict: 2,
    collections.Counter: 1,
    abc.Iterable: 1,
    abc.Iterator: 1,
    abc.Collection: 1,
    abc.Container: 1,
    abc.Sequence: 1,
    abc.MutableSequence: 1,
    abc.Set: 1,
    abc.MutableSet: 1,
    abc.Mapping: 2,
    abc.MutableMapping: 2,
    abc.Callable: None,
}


def declared_arity(raw_type: type) -> Optional[int]:
    """Return the number of type parameters a class declares.

    Args:
        raw_type: The class to inspect

    Returns:
        The declared arity, or None for variadic classes such as ``tuple``
    """
    if raw_type in _DECLARED_ARITY:
        return _DECLARED_ARITY[raw_type]
    return len(getattr(raw_type, "__parameters__", ()))


def _is_subclass(provided: type, target: type) -> bool:
    try:
        return issubclass(provided, target)
    except TypeError:
        return False


def _origin_class(base: Any) -> Any:
    return get_origin(base) or base


def _declared_bases(raw_type: type) -> List[Any]:
    """Declared bases in declaration order, generic markers skipped."""
    bases = raw_type.__dict__.get("__orig_bases__", raw_type.__bases__)
    return [
        base
        for base in bases
        if isinstance(_origin_class(base), type)
        and _origin_class(base) not in (Generic, Protocol, object)
    ]


@dataclass(frozen=True, slots=True, repr=False)
class TypeDescriptor:
    """Immutable structural description of a declared type.

    Attributes:
        raw_type: The raw class; ``object`` for type variables and wildcards
        type_arguments: Ordered type-argument descriptors
        type_variable: Variable name, ``"?"`` for wildcards, None otherwise
        upper_bounds: Upper bounds of a variable or wildcard, never empty
        annotations: Metadata tags such as configuration hints
        array: Whether this is a homogeneous variable-length tuple
    """

    raw_type: type = object
    type_arguments: Tuple[TypeDescriptor, ...] = ()
    type_variable: Optional[str] = None
    upper_bounds: Tuple[TypeDescriptor, ...] = ()
    annotations: Tuple[Any, ...] = ()
    array: bool = False

    def __post_init__(self) -> None:
        if self.type_variable is not None and not self.upper_bounds:
            object.__setattr__(self, "upper_bounds", (OBJECT,))

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def of(cls, raw_type: Any, *type_arguments: Any) -> TypeDescriptor:
        """Create a descriptor for a raw class with optional type arguments.

        Args:
            raw_type: A class, or an existing descriptor when no arguments are given
            *type_arguments: Classes, typing annotations or descriptors

        Returns:
            The descriptor

        Raises:
            ConfigurationError: If the arguments do not match the declared arity
        """
        if isinstance(raw_type, TypeDescriptor) and not type_arguments:
            return raw_type
        if not isinstance(raw_type, type):
            raise ConfigurationError(
                f"[{raw_type!r}] is not a class, use TypeDescriptor.for_type() for annotations"
            )
        arguments = tuple(cls.for_type(argument) for argument in type_arguments)
        if arguments:
            arity = declared_arity(raw_type)
            if arity is not None and arity != len(arguments):
                raise ConfigurationError(
                    f"Type [{raw_type.__qualname__}] cannot have type parameters "
                    f"[{', '.join(str(argument) for argument in arguments)}]"
                )
        return cls(raw_type=raw_type, type_arguments=arguments)

    @classmethod
    def type_variable_of(cls, name: str, *upper_bounds: Any) -> TypeDescriptor:
        """Create a type variable, unbounded when no bounds are given."""
        if not name or name == WILDCARD:
            raise ConfigurationError(f"Invalid type variable name [{name!r}]")
        bounds = tuple(cls.for_type(bound) for bound in upper_bounds)
        return cls(type_variable=name, upper_bounds=bounds)

    @classmethod
    def wildcard(cls, *upper_bounds: Any) -> TypeDescriptor:
        """Create a wildcard, unbounded when no bounds are given."""
        bounds = tuple(cls.for_type(bound) for bound in upper_bounds)
        return cls(type_variable=WILDCARD, upper_bounds=bounds)

    @classmethod
    def array_of(cls, component: Any) -> TypeDescriptor:
        """Create a descriptor for ``tuple[component, ...]``."""
        return cls(raw_type=tuple, type_arguments=(cls.for_type(component),), array=True)

    @classmethod
    def for_type(cls, annotation: Any) -> TypeDescriptor:
        """Convert a class or typing annotation into a descriptor.

        Supports classes, ``Any``, ``TypeVar``, parameterized generics,
        ``tuple[X, ...]``, ``Annotated[X, tag, ...]`` and ``None``.

        Raises:
            ConfigurationError: For unions, literals and other unsupported forms
        """
        if isinstance(annotation, TypeDescriptor):
            return annotation
        if annotation is None or annotation is type(None):
            return cls(raw_type=type(None))
        if annotation is Any:
            return cls.wildcard()
        if isinstance(annotation, TypeVar):
            bounds = () if annotation.__bound__ is None else (annotation.__bound__,)
            return cls.type_variable_of(annotation.__name__, *bounds)

        origin = get_origin(annotation)
        if origin is Annotated:
            base, *metadata = get_args(annotation)
            return cls.for_type(base).with_annotations(*metadata)
        if origin is not None:
            if origin in (Union, types.UnionType, Literal) or not isinstance(origin, type):
                raise ConfigurationError(f"Unsupported type annotation [{annotation!r}]")
            arguments = get_args(annotation)
            if origin is tuple and len(arguments) == 2 and arguments[1] is Ellipsis:
                return cls.array_of(arguments[0])
            if origin is abc.Callable:
                return cls.of(origin)
            return cls.of(origin, *arguments)
        if isinstance(annotation, type):
            return cls.of(annotation)
        raise ConfigurationError(f"Unsupported type annotation [{annotation!r}]")

    def with_annotations(self, *annotations: Any) -> TypeDescriptor:
        """Return a copy with additional metadata tags attached."""
        try:
            hash(annotations)
        except TypeError as e:
            raise ConfigurationError(f"Type annotations must be hashable: {annotations!r}") from e
        return dataclasses.replace(self, annotations=self.annotations + tuple(annotations))

    # =========================================================================
    # Queries
    # =========================================================================

    def is_wildcard(self) -> bool:
        return self.type_variable == WILDCARD

    def is_type_variable(self) -> bool:
        return self.type_variable is not None and self.type_variable != WILDCARD

    def is_type_variable_or_wildcard(self) -> bool:
        return self.type_variable is not None

    def is_generic(self) -> bool:
        """True if the descriptor carries type arguments."""
        return bool(self.type_arguments)

    def is_array(self) -> bool:
        return self.array

    def is_of_type(self, raw_type: type) -> bool:
        return self.raw_type is raw_type

    def has_bounds(self) -> bool:
        """True unless the only upper bound is the universal top type."""
        if len(self.upper_bounds) > 1:
            return True
        return len(self.upper_bounds) == 1 and self.upper_bounds[0].raw_type is not object

    def get_component_type(self) -> Optional[TypeDescriptor]:
        """Return the element type of an array, None for other descriptors."""
        if self.array:
            return self.type_arguments[0]
        return None

    def get_annotation(self, kind: type) -> Optional[Any]:
        """Return the first metadata tag that is an instance of ``kind``."""
        for annotation in self.annotations:
            if isinstance(annotation, kind):
                return annotation
        return None

    def is_assignable_from(self, provided: Any) -> bool:
        """True if values of ``provided`` can be used where this type is required."""
        return TypeDescriptor.of(provided).can_be_assigned_to(self)

    # =========================================================================
    # Compatibility
    # =========================================================================

    def can_be_assigned_to(self, target: TypeDescriptor) -> bool:
        """Check whether values described here are acceptable for ``target``.

        Args:
            target: The required type

        Returns:
            True if compatible
        """
        if target.is_type_variable_or_wildcard():
            return self._satisfies_upper_bounds_of(target)
        if _is_subclass(self.raw_type, target.raw_type):
            return _type_arguments_compatible(self.type_arguments, target.type_arguments)
        return boxed_type_matches(self.raw_type, target.raw_type)

    def _satisfies_upper_bounds_of(self, target: TypeDescriptor) -> bool:
        if self.is_type_variable_or_wildcard():
            # Intersection semantics: each target bound needs one own bound
            return all(
                any(own.can_be_assigned_to(bound) for own in self.upper_bounds)
                for bound in target.upper_bounds
            )
        return all(self.can_be_assigned_to(bound) for bound in target.upper_bounds)

    # =========================================================================
    # Supertypes
    # =========================================================================

    def find_super_type(self, target_raw_type: type) -> Optional[TypeDescriptor]:
        """Find the first declared ancestor with the given raw class.

        Bases are searched breadth-first at each level (direct bases in
        declaration order), then depth-first into each base. The result carries
        the type arguments as written in the class statement, e.g. for
        ``class Names(list[str])`` looking up ``list`` returns ``list[str]``.

        Args:
            target_raw_type: Raw class of the ancestor to find

        Returns:
            The ancestor's descriptor, this descriptor if it already matches,
            or None if there is no such ancestor
        """
        if self.raw_type is target_raw_type:
            return self
        return _find_super_type_in(self.raw_type, target_raw_type)

    # =========================================================================
    # Rendering
    # =========================================================================

    def __str__(self) -> str:
        prefix = "".join(f"@{annotation!r} " for annotation in self.annotations)
        return prefix + self._describe()

    def __repr__(self) -> str:
        return f"TypeDescriptor({self})"

    def _describe(self) -> str:
        if self.is_type_variable_or_wildcard():
            if not self.has_bounds():
                return self.type_variable
            bounds = " & ".join(str(bound) for bound in self.upper_bounds)
            return f"{self.type_variable} extends {bounds}"
        name = self.raw_type.__qualname__
        if self.array:
            return f"{name}[{self.type_arguments[0]}, ...]"
        if self.type_arguments:
            return f"{name}[{', '.join(str(argument) for argument in self.type_arguments)}]"
        return name


def _type_arguments_compatible(
    provided: Tuple[TypeDescriptor, ...], target: Tuple[TypeDescriptor, ...]
) -> bool:
    if not provided or not target or len(provided) != len(target):
        return True
    return all(p.can_be_assigned_to(t) for p, t in zip(provided, target))


def _find_super_type_in(raw_type: type, target_raw_type: type) -> Optional[TypeDescriptor]:
    bases = _declared_bases(raw_type)
    for base in bases:
        if _origin_class(base) is target_raw_type:
            return TypeDescriptor.for_type(base)
    for base in bases:
        found = _find_super_type_in(_origin_class(base), target_raw_type)
        if found is not None:
            return found
    return None


OBJECT = TypeDescriptor(object)
