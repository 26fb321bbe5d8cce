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
"""Primitive machine types and their boxed Python counterparts.

Python has no unboxed scalars of its own, so the fixed-width ``ctypes``
scalars play the role of primitives. Each one pairs with the builtin type
its values box to, and the pair is compatible in both directions.
"""

from __future__ import annotations

import ctypes
from typing import Dict, Tuple

# Primitive -> boxed
PRIMITIVE_TO_BOXED: Dict[type, type] = {
    ctypes.c_long: int,
    ctypes.c_int: int,
    ctypes.c_short: int,
    ctypes.c_byte: int,
    ctypes.c_double: float,
    ctypes.c_float: float,
    ctypes.c_bool: bool,
    ctypes.c_wchar: str,
}

# Inclusive value ranges of the integral primitives
INTEGRAL_BOUNDS: Dict[type, Tuple[int, int]] = {
    ctypes.c_byte: (-(2**7), 2**7 - 1),
    ctypes.c_short: (-(2**15), 2**15 - 1),
    ctypes.c_int: (-(2**31), 2**31 - 1),
    ctypes.c_long: (
        -(2 ** (8 * ctypes.sizeof(ctypes.c_long) - 1)),
        2 ** (8 * ctypes.sizeof(ctypes.c_long) - 1) - 1,
    ),
}

CHARACTER_TYPES: Tuple[type, ...] = (ctypes.c_wchar,)
DECIMAL_TYPES: Tuple[type, ...] = (ctypes.c_double, ctypes.c_float)


def is_primitive(raw_type: type) -> bool:
    """Check whether a raw type is one of the primitive scalars."""
    return raw_type in PRIMITIVE_TO_BOXED


def boxed_type_of(raw_type: type) -> type:
    """Return the boxed type of a primitive, or the type itself."""
    return PRIMITIVE_TO_BOXED.get(raw_type, raw_type)


def boxed_type_matches(provided: type, target: type) -> bool:
    """Check whether two raw types form a primitive/boxed pair.

    Args:
        provided: Raw type of the produced value
        target: Raw type required at the use site

    Returns:
        True if ``provided`` is a primitive boxing to ``target``, or the
        other way round
    """
    if PRIMITIVE_TO_BOXED.get(provided) is target:
        return True
    return PRIMITIVE_TO_BOXED.get(target) is provided
