# tests/conftest.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Propcalc tests.

This module provides pytest configuration, fixtures, and utilities for testing
the formula parser and evaluator. It ensures proper module path setup and
provides common formulas used across the test modules.
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
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import semantics
        import support
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def basic_formula():
    """Provide a basic formula for testing.

    Returns:
        str: Simple two-proposition conjunction
    """
    return "p ∧ q"


@pytest.fixture
def complex_formula():
    """Provide a nested formula exercising every connective.

    Returns:
        str: Formula over five propositions with grouping and negation
    """
    return "((P ∧ (T → Q)) → ¬(R ⇄ Q)) ∧ ¬S"
