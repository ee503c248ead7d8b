"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For candidate/criteria builders, see tests/fixtures/professional_fixtures.py
"""

import pytest

from pro_scout.config_loader import MatchingConfig
from pro_scout.matcher.service import MatcherService


@pytest.fixture
def matching_config():
    """Default matching configuration (standard weights, 40-point floor)."""
    return MatchingConfig()


@pytest.fixture
def matcher_service(matching_config):
    return MatcherService(matching_config)
