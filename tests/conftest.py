"""
Pytest configuration and shared fixtures for tmplfuncs tests.
"""

import pytest

from tmplfuncs.jinja import create_environment


class Stringer:
    """A value with its own text rendering."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value


@pytest.fixture
def stringer():
    """Factory fixture for values that override __str__."""

    def _create(value: str) -> Stringer:
        return Stringer(value)

    return _create


@pytest.fixture
def jinja_env():
    """Jinja environment with the function set installed."""
    return create_environment()


@pytest.fixture
def render(jinja_env):
    """Fixture to render a template string."""

    def _render(source: str, **context) -> str:
        return jinja_env.from_string(source).render(**context)

    return _render
