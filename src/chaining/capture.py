"""
Bridge from exception-raising callables to error-returning actions.

Chains only see errors that actions *return*. Most Python code raises
instead, so these wrappers catch the listed exception types and hand them
back as the action's error, letting the chain latch on them.

Before:
    def load(path):
        try:
            return Path(path).read_text(), None
        except OSError as e:
            return None, e

After:
    ctx.apply_unary_value(capture(lambda p: Path(p).read_text(), OSError), arg)

Exception types that aren't listed propagate unchanged (default: Exception).
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def capture(
    fn: Callable[..., T],
    *exceptions: type[BaseException],
) -> Callable[..., tuple[T | None, BaseException | None]]:
    """
    Wrap `fn` into the (result, error) shape used by value and bool actions.

        ctx.apply_nullary_value(capture(fetch_config, ConnectionError))
    """
    caught = exceptions or (Exception,)

    @functools.wraps(fn)
    def wrapper(*args: Any) -> tuple[T | None, BaseException | None]:
        try:
            return fn(*args), None
        except caught as e:
            return None, e

    return wrapper


def capture_void(
    fn: Callable[..., Any],
    *exceptions: type[BaseException],
) -> Callable[..., BaseException | None]:
    """
    Wrap `fn` into the error-only shape used by void actions. Its return value is dropped.

        ctx.apply_unary_void(capture_void(print), ActionArg.previous())
    """
    caught = exceptions or (Exception,)

    @functools.wraps(fn)
    def wrapper(*args: Any) -> BaseException | None:
        try:
            fn(*args)
        except caught as e:
            return e
        return None

    return wrapper
