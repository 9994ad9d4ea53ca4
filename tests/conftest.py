# tests/conftest.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the global logger to the session streams before any capsys test
    from utils.logger import get_logger

    get_logger()

    yield


@pytest.fixture
def registry():
    """Provide an empty variable registry."""
    from parser.variable_registry import VariableRegistry

    return VariableRegistry()


@pytest.fixture
def basic_formula():
    """Provide a two-variable formula."""
    return "a&b"


@pytest.fixture
def complex_formula():
    """Provide a formula using every connective."""
    return "(p->r)|(!s<->!t)&u"
