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
"""Shared fixtures for propcheck tests."""

import pytest

from propcheck.properties.configuration import PropertyConfiguration
from propcheck.properties.reporting import CollectingReporter
from propcheck.providers.registry import ProviderRegistry


@pytest.fixture
def registry() -> ProviderRegistry:
    """Registry holding the default providers."""
    return ProviderRegistry.defaults()


@pytest.fixture
def configuration() -> PropertyConfiguration:
    """Small, reproducible configuration."""
    return PropertyConfiguration(label="test", seed="42", tries=100)


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()
