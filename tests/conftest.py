"""Shared fixtures for the mock API unit tests."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from jwt_pizza_mock.config import MockApiSettings
from jwt_pizza_mock.service import MockPizzaService


@pytest.fixture
def settings():
    """Settings pinned to the defaults, independent of the environment."""
    return MockApiSettings()


@pytest.fixture
def storefront(settings):
    """Service seeded with Kai Chen / Min Ad / Fran Chise."""
    return MockPizzaService.storefront(settings)


@pytest.fixture
def profile(settings):
    """Service seeded with Ad Min / Di Ner / Fran Chisee."""
    return MockPizzaService.profile(settings)
