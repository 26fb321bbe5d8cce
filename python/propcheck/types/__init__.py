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
"""Type descriptors, primitive pairs and configuration hints."""

from .descriptor import OBJECT, WILDCARD, TypeDescriptor, declared_arity
from .hints import CharRange, IntRange, Scale, Size, StringLength
from .primitives import INTEGRAL_BOUNDS, boxed_type_matches, is_primitive

__all__ = [
    # Descriptors
    "TypeDescriptor",
    "OBJECT",
    "WILDCARD",
    "declared_arity",
    # Primitives
    "INTEGRAL_BOUNDS",
    "boxed_type_matches",
    "is_primitive",
    # Hints
    "IntRange",
    "CharRange",
    "StringLength",
    "Size",
    "Scale",
]
