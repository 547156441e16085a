"""
Jinja2 integration for the tmplfuncs function set.

Registers every function as a global (``{{ substr(0, 3, name) }}``) and as
a filter (``{{ name | substr(0, 3) }}``). Jinja hands the piped value to a
filter as its first argument while the function set expects it last, so
filters are wrapped to move it.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from jinja2 import Environment, StrictUndefined, Undefined

from tmplfuncs.registry import func_map

logger = logging.getLogger(__name__)


def _absent(value: Any) -> Any:
    # Missing template variables behave like None; strict mode still raises
    if isinstance(value, Undefined) and not isinstance(value, StrictUndefined):
        return None
    return value


def as_global(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a function for direct calls from a template."""

    @functools.wraps(func)
    def call(*args: Any) -> Any:
        return func(*(_absent(a) for a in args))

    return call


def as_filter(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a function so the piped value becomes its last argument."""

    @functools.wraps(func)
    def call(value: Any, *args: Any) -> Any:
        return func(*(_absent(a) for a in args), _absent(value))

    return call


def install(
    env: Environment,
    *,
    globals: bool = True,
    filters: bool = True,
    overwrite: bool = True,
) -> Environment:
    """
    Register the function set in a Jinja environment.

    Jinja's own ``trim``, ``replace``, ``join``, ``indent``, ... filters are
    replaced so piped calls follow this library's semantics. Pass
    ``overwrite=False`` to keep names the environment already has.

    Args:
        env: The environment to extend
        globals: Register functions as template globals
        filters: Register functions as filters
        overwrite: Replace existing globals/filters with the same name (default)

    Returns:
        The same environment, for chaining
    """
    skipped = []
    for name, func in func_map().items():
        if globals:
            if overwrite or name not in env.globals:
                env.globals[name] = as_global(func)
            else:
                skipped.append(name)
        if filters:
            if overwrite or name not in env.filters:
                env.filters[name] = as_filter(func)
            else:
                skipped.append(name)
    if skipped:
        logger.debug("kept existing jinja names: %s", ", ".join(sorted(set(skipped))))
    return env


def create_environment(**options: Any) -> Environment:
    """Create a Jinja environment with the function set installed."""
    overwrite = options.pop("overwrite", True)
    return install(Environment(**options), overwrite=overwrite)


__all__ = [
    "as_global",
    "as_filter",
    "install",
    "create_environment",
]
