# topmark:header:start
#
#   project      : hueline
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the hueline test suite.

Sets up TRACE logging for the run and makes sure the developer's shell
environment (``NO_COLOR``, ``FORCE_COLOR``, ``HUELINE_LOG_LEVEL``) cannot leak
into color decisions made by tests.
"""

from __future__ import annotations

import ast
import inspect
import io
import textwrap
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from hueline.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class FakeTTY(io.StringIO):
    """In-memory text stream that claims to be (or not be) a terminal."""

    def __init__(self, *, tty: bool = True) -> None:
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class BrokenStream(io.StringIO):
    """Text stream whose writes always fail like a closed pipe."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


def type_checking_declarations(obj: Any) -> set[str]:
    """Return the function names declared under `if TYPE_CHECKING:` in a module or class.

    Args:
        obj (Any): The module or class whose source is inspected.

    Returns:
        set[str]: Names of the functions declared for type checkers only.
    """
    tree: ast.Module = ast.parse(textwrap.dedent(inspect.getsource(obj)))
    body: list[ast.stmt] = tree.body
    if inspect.isclass(obj):
        body = cast("ast.ClassDef", body[0]).body
    names: set[str] = set()
    for node in body:
        if isinstance(node, ast.If) and isinstance(node.test, ast.Name):
            if node.test.id == "TYPE_CHECKING":
                names.update(n.name for n in node.body if isinstance(n, ast.FunctionDef))
    return names


@pytest.fixture(autouse=True)
def clean_color_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color and log-level variables from the environment for each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    for name in ("NO_COLOR", "FORCE_COLOR", logging.LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tty() -> FakeTTY:
    """Return a stream that reports itself as an interactive terminal."""
    return FakeTTY(tty=True)


@pytest.fixture
def pipe() -> FakeTTY:
    """Return a stream that reports itself as *not* a terminal."""
    return FakeTTY(tty=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
