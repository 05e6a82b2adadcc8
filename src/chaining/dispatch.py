"""
Dispatch — the single step that every Apply call funnels into.

A dispatcher decides, for one action against one Context:
  1. whether the action runs at all (never once the context is faulted)
  2. which value is injected (supplied value or previous result)
  3. how the context is updated (result and error, both, unconditionally)

    ┌───────────┐  clear   ┌──────────┐  (result, err)  ┌──────────────┐
    │ Context   │─────────→│  action  │────────────────→│ last_result  │
    │ faulted?  │          │ (inject) │                 │ last_error   │
    └─────┬─────┘          └──────────┘                 └──────────────┘
          │ faulted
          └──→ skip: action not invoked, state untouched

The dispatcher is bound into the Context at construction, so an alternate
one (tracing, counting, test doubles) can be swapped in without touching
the Context's public surface. Any callable matching the Dispatcher protocol
qualifies.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

import structlog

from chaining.argument import ActionArg
from chaining.config import ChainingSettings

if TYPE_CHECKING:
    from chaining.context import Context

Action: TypeAlias = Callable[[Any], tuple[Any, Any]]
"""Canonical action shape: one optional value in, (result, error) out."""


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class Dispatcher(Protocol):
    """Anything that can execute one canonical action against a Context."""

    def __call__(self, context: Context, action: Action, arg: ActionArg) -> None: ...


# ──────────────────────── Canonical dispatcher ────────────────────────


def dispatch(context: Context, action: Action, arg: ActionArg) -> None:
    """
    Run `action` against `context` unless the context is already faulted.

    The result and error returned by the action both replace the context's
    state, even when the error is present: whatever partial value a failing
    action chose to return stays observable at flush().

    Exceptions raised by the action propagate and leave the context as it was.
    """
    if context.last_error is not None:
        return
    if arg.behavior.injects_supplied_value:
        injected = arg.value
    else:
        injected = context.last_result
    result, error = action(injected)
    context.last_result = result
    context.last_error = error


# ──────────────────────── Logging ────────────────────────


class LoggingDispatcher:
    """
    Dispatcher that traces each step with structlog, then delegates.

    Wraps another dispatcher (decorator pattern). It observes and never
    alters the chain: skipped steps stay skipped, errors are reported as
    events but left in the context for flush().

        ctx = new_context(LoggingDispatcher(operation="ImportOrders"))
    """

    def __init__(
        self,
        inner: Dispatcher = dispatch,
        operation: str = "chain",
        logger: Any = None,
    ) -> None:
        self._inner = inner
        self._operation = operation
        self._log = logger if logger is not None else structlog.get_logger("chaining.dispatch")
        self._step = 0

    @property
    def steps(self) -> int:
        """Number of dispatch calls seen so far, skipped ones included."""
        return self._step

    def __call__(self, context: Context, action: Action, arg: ActionArg) -> None:
        self._step += 1
        log = self._log.bind(operation=self._operation, step=self._step)

        if context.last_error is not None:
            log.debug("chain.action_skipped", behavior=arg.behavior.name)
            self._inner(context, action, arg)
            return

        start = time.monotonic()
        try:
            self._inner(context, action, arg)
        except Exception as e:
            log.error(
                "chain.action_raised",
                elapsed_ms=_elapsed_ms(start),
                exception=repr(e),
            )
            raise

        if context.last_error is not None:
            log.warning(
                "chain.action_failed",
                elapsed_ms=_elapsed_ms(start),
                error=repr(context.last_error),
            )
        else:
            log.info("chain.action_completed", elapsed_ms=_elapsed_ms(start))


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 3)


def dispatcher_from_settings(settings: ChainingSettings) -> Dispatcher:
    """Pick the canonical dispatcher, or a traced one when settings ask for it."""
    if settings.trace_dispatch:
        return LoggingDispatcher(operation=settings.trace_operation)
    return dispatch
