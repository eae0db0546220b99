"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests import helpers as tests.*.
"""

import pytest


@pytest.fixture(scope="session")
def linter():
    """Linter backed by the real tree-sitter Swift grammar."""
    from async_closure_linter import create_linter

    return create_linter()
