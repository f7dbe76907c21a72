"""
Pytest configuration and shared fixtures for identifier-validator tests.
"""

import io

import pytest
import structlog
from rich.console import Console

from identifier_validator.config import Settings, get_settings
from identifier_validator.logging_config import configure_library_logging
from identifier_validator.validators import ValidationEngine


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    """Each test starts from the library logging setup and a fresh settings cache."""
    structlog.reset_defaults()
    configure_library_logging()
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """A private engine with the default validators."""
    return ValidationEngine()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def output():
    """Buffer that captures everything a test console prints."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Plain-text console: no colour, no terminal detection, wide enough to never wrap."""
    return Console(file=output, force_terminal=False, color_system=None, width=200)
