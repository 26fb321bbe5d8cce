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
"""Shrinking engine: shrinkables, falsifiers and the shrinking driver."""

from .combined import CombinedShrinkable, parameters_shrinkable
from .containers import (
    ShrinkableContainer,
    ShrinkableList,
    ShrinkableSet,
    ShrinkableString,
    ShrinkableTuple,
)
from .distance import ShrinkingDistance
from .falsifier import FalsificationResult, FalsificationStatus, Falsifier
from .numeric import ShrinkableInteger, ShrinkableSample
from .sequence import ShrinkingSequence, ShrinkResult
from .shrinkable import FilteredShrinkable, MappedShrinkable, Shrinkable, Unshrinkable

__all__ = [
    # Core
    "Shrinkable",
    "ShrinkingDistance",
    "ShrinkingSequence",
    "ShrinkResult",
    # Falsifiers
    "Falsifier",
    "FalsificationResult",
    "FalsificationStatus",
    # Shrinkables
    "Unshrinkable",
    "MappedShrinkable",
    "FilteredShrinkable",
    "ShrinkableInteger",
    "ShrinkableSample",
    "ShrinkableContainer",
    "ShrinkableList",
    "ShrinkableTuple",
    "ShrinkableString",
    "ShrinkableSet",
    "CombinedShrinkable",
    "parameters_shrinkable",
]
