"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.linter_test_utils` imports.
"""

from unittest.mock import MagicMock

import pytest

from field_definitions_linter.infrastructure.di.container import FieldDefinitionsContainer


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


@pytest.fixture(autouse=True)
def _reset_container():
    yield
    FieldDefinitionsContainer.reset()
